"""Composable OCR receipt parser components."""

from .fields_parser import extract_purchase_date
from .items_text_parser import extract_item_lines, is_likely_item_line, split_receipt_lines

__all__ = [
    "extract_item_lines",
    "extract_purchase_date",
    "is_likely_item_line",
    "split_receipt_lines",
]

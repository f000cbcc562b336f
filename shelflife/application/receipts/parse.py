"""Receipt text parse workflow orchestration."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from shelflife.receipt.ocr_result_parser import parse_receipt
from shelflife.runtime import get_logger, load_item_category_rule_table

if TYPE_CHECKING:
    from shelflife.domain.receipt import ParsedReceipt

logger = get_logger(__name__)

ParseStatus = Literal[
    "file_not_found",
    "no_items",
    "parsed",
]

# Passing "-" as the text path reads OCR text from stdin.
STDIN_PATH = "-"


@dataclass(frozen=True)
class ReceiptParseRequest:
    """Inputs for running the receipt parse workflow."""

    text_path: str
    rule_paths: tuple[str, ...] | None = None
    now: datetime | None = None


@dataclass(frozen=True)
class ReceiptParseResult:
    """Outcome from the receipt parse workflow."""

    status: ParseStatus
    receipt: ParsedReceipt | None = None
    error: str | None = None


def _read_text(text_path: str) -> str:
    if text_path == STDIN_PATH:
        return sys.stdin.read()
    return Path(text_path).read_text(encoding="utf-8")


def run_receipt_parse(request: ReceiptParseRequest) -> ReceiptParseResult:
    """Run parse flow: read OCR text -> load rules -> parse."""
    if request.text_path != STDIN_PATH and not Path(request.text_path).is_file():
        return ReceiptParseResult(
            status="file_not_found",
            error=f"Receipt text file not found: {request.text_path}",
        )

    text = _read_text(request.text_path)
    rule_table = load_item_category_rule_table(request.rule_paths)
    receipt = parse_receipt(text, now=request.now, rule_table=rule_table)
    logger.info(
        "Parsed %s: %d item(s), date %s",
        request.text_path,
        len(receipt.items),
        "placeholder" if receipt.date_is_placeholder else receipt.purchase_date.isoformat(),
    )

    if not receipt.has_items:
        return ReceiptParseResult(status="no_items", receipt=receipt)
    return ReceiptParseResult(status="parsed", receipt=receipt)

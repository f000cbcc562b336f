"""Receipt command handlers used by the unified CLI."""

import argparse
import sys

from shelflife.runtime import get_logger

logger = get_logger(__name__)


def _rule_paths(args: argparse.Namespace) -> tuple[str, ...] | None:
    rules = getattr(args, "rules", None)
    return tuple(rules) if rules else None


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse receipt OCR text and print the purchase date and categorized items."""
    from shelflife.application.receipts.parse import ReceiptParseRequest, run_receipt_parse
    from shelflife.receipt.formatter import format_parsed_receipt, format_parsed_receipt_json

    try:
        result = run_receipt_parse(
            ReceiptParseRequest(
                text_path=args.text_file,
                rule_paths=_rule_paths(args),
            )
        )
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        sys.exit(1)

    if result.status == "file_not_found":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        sys.exit(1)

    receipt = result.receipt
    if receipt is None:
        print("Parse failed: missing receipt output.")
        sys.exit(1)

    if args.json:
        print(format_parsed_receipt_json(receipt))
    else:
        print(format_parsed_receipt(receipt))

    if result.status == "no_items":
        logger.info("No item lines recognized; recapture the receipt with prices visible")


def cmd_categorize(args: argparse.Namespace) -> None:
    """Print the category and shelf-life days for one item line."""
    from shelflife.receipt.item_categories import categorize, categorize_debug
    from shelflife.runtime import load_item_category_rule_table

    try:
        rule_table = load_item_category_rule_table(_rule_paths(args))
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        sys.exit(1)

    match = categorize(args.line, rule_table=rule_table)
    print(f"{match.category}\t{match.days}")

    if args.debug:
        for category, days, keyword in categorize_debug(args.line, rule_table=rule_table):
            print(f"  {category}\t{days}\t{keyword}")


def cmd_normalize(args: argparse.Namespace) -> None:
    """Print the normalized form of the given text."""
    from shelflife.receipt.text_normalization import normalize

    print(normalize(args.text))

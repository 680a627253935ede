#!/usr/bin/env python3
"""
Render a notice PDF locally, without taking payment.

Useful for checking layout changes:

    python scripts/render_notice.py section21 --landlord-name "Jane Doe" \
        --reason "Non-payment of rent" -o notice.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from src.notices.catalog import NOTICE_CATALOG, InvalidNoticeType
from src.notices.validation import validate_field_set
from src.rendering.pdf_writer import render_notice
from src.utils.config_loader import load_app_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a landlord notice to PDF")
    parser.add_argument("notice_type", help=f"One of: {', '.join(NOTICE_CATALOG)}")
    parser.add_argument("--landlord-name", default="")
    parser.add_argument("--landlord-address", default="")
    parser.add_argument("--tenant-name", default="")
    parser.add_argument("--tenant-address", default="")
    parser.add_argument("--property-address", default="")
    parser.add_argument("--tenancy-start", default="")
    parser.add_argument("--notice-end", default="")
    parser.add_argument("--reason", default="")
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="Notice date (YYYY-MM-DD); default today")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default <type>.pdf)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger("render_notice")

    raw = {
        "landlordName": args.landlord_name,
        "landlordAddress": args.landlord_address,
        "tenantName": args.tenant_name,
        "tenantAddress": args.tenant_address,
        "propertyAddress": args.property_address,
        "tenancyStart": args.tenancy_start,
        "noticeEnd": args.notice_end,
        "reason": args.reason,
    }
    try:
        fields = validate_field_set(args.notice_type, raw)
    except InvalidNoticeType as e:
        logger.error("%s", e)
        return 2

    cfg = load_app_config()
    result = render_notice(fields.notice_type, fields, today=args.date, config=cfg.document)
    if not result.ok:
        logger.error("Render failed: %s", result.error)
        return 1

    output = args.output or Path(f"{fields.notice_type}.pdf")
    output.write_bytes(result.content)
    print(f"Wrote {output} ({result.page_count} page(s), {len(result.content)} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())

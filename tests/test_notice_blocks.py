"""Tests for the notice block sequence."""

from datetime import date

from src.notices.catalog import lookup
from src.rendering.blocks import (
    DISCLAIMER_TEXT,
    Align,
    Heading,
    KeyValueLine,
    Paragraph,
    Spacer,
    build_notice_blocks,
    format_uk_date,
)


def _content(blocks):
    return [b for b in blocks if not isinstance(b, Spacer)]


def test_block_order(field_set, notice_date):
    blocks = _content(build_notice_blocks(lookup("section21"), field_set, today=notice_date))
    texts = [b.text for b in blocks]
    assert texts == [
        "UK Landlord Legal Notice",
        "Section 21 (Form 6A) – Notice to End Assured Shorthold Tenancy",
        "Date: 05/03/2024",
        "Landlord Details",
        "Name: Jane Doe",
        "Address: 1 Letting Rd",
        "Tenant Details",
        "Name: John Smith",
        "Address: 2 Rental Ave",
        "Property Details",
        "Address: 2 Rental Ave",
        "Tenancy Start Date: 2023-01-01",
        "Notice End Date: 2024-01-01",
        "Disclaimer",
        DISCLAIMER_TEXT,
    ]


def test_heading_styles(field_set, notice_date):
    blocks = _content(build_notice_blocks(lookup("section21"), field_set, today=notice_date))
    title, subtitle, date_line = blocks[0], blocks[1], blocks[2]
    assert isinstance(title, Heading) and title.align == Align.CENTER and title.bold
    assert isinstance(subtitle, Heading) and subtitle.align == Align.CENTER
    assert isinstance(date_line, KeyValueLine) and date_line.align == Align.END
    assert isinstance(blocks[-1], Paragraph)


def test_empty_reason_gives_eight_key_value_lines(field_set):
    blocks = build_notice_blocks(lookup("section21"), field_set)
    kv = [b for b in blocks if isinstance(b, KeyValueLine)]
    # Date, landlord x2, tenant x2, property x3.
    assert len(kv) == 8
    assert not any(b.label.startswith("Reason") for b in kv)


def test_reason_adds_one_key_value_line(field_set, field_set_with_reason):
    plain = [b for b in build_notice_blocks(lookup("section21"), field_set) if isinstance(b, KeyValueLine)]
    blocks = build_notice_blocks(lookup("section21"), field_set_with_reason)
    kv = [b for b in blocks if isinstance(b, KeyValueLine)]
    assert len(kv) == 9
    assert len(kv) == len(plain) + 1
    assert kv[:-1] == plain
    assert kv[-1].text == "Reason (if applicable): Non-payment of rent"


def test_empty_fields_keep_their_labels():
    from src.notices.validation import validate_field_set

    blocks = build_notice_blocks(lookup("renewal"), validate_field_set("renewal", {}))
    kv = [b.text for b in blocks if isinstance(b, KeyValueLine)]
    assert "Name: " in kv
    assert "Notice End Date: " in kv


def test_disclaimer_text_is_verbatim():
    assert DISCLAIMER_TEXT == (
        "This document was generated using an automated service based on official government templates. "
        "It does not constitute legal advice. Please review the contents carefully and ensure it meets your "
        "specific circumstances. For legal advice, consult a qualified solicitor."
    )


def test_uk_date_format():
    assert format_uk_date(date(2024, 12, 1)) == "01/12/2024"

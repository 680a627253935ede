"""
Document blocks.

A notice is an ordered list of blocks. Blocks carry content and emphasis
only; positions are decided by `layout.layout_blocks`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from src.notices.catalog import NoticeMetadata
from src.notices.validation import FieldSet

DOCUMENT_HEADING = "UK Landlord Legal Notice"

DISCLAIMER_TEXT = (
    "This document was generated using an automated service based on official government templates. "
    "It does not constitute legal advice. Please review the contents carefully and ensure it meets your "
    "specific circumstances. For legal advice, consult a qualified solicitor."
)

REASON_LABEL = "Reason (if applicable)"


class Align(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"


class TextRole(str, Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    BODY = "body"


@dataclass(frozen=True)
class Heading:
    text: str
    align: Align = Align.START
    bold: bool = False
    role: TextRole = TextRole.BODY


@dataclass(frozen=True)
class KeyValueLine:
    label: str
    value: str
    align: Align = Align.START

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class Paragraph:
    text: str
    bold: bool = False
    align: Align = Align.START


@dataclass(frozen=True)
class Spacer:
    # In body lines; 1.0 is one blank line at the body font size.
    lines: float = 1.0


Block = Union[Heading, KeyValueLine, Paragraph, Spacer]


def format_uk_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def build_notice_blocks(notice: NoticeMetadata, fields: FieldSet, today: Optional[date] = None) -> List[Block]:
    """Return the fixed block sequence for a notice.

    The reason line is included only when `fields.reason` is non-empty.
    """
    today = today or date.today()

    blocks: List[Block] = [
        Heading(DOCUMENT_HEADING, align=Align.CENTER, bold=True, role=TextRole.TITLE),
        Spacer(),
        Heading(notice.name, align=Align.CENTER, role=TextRole.SUBTITLE),
        Spacer(),
        KeyValueLine("Date", format_uk_date(today), align=Align.END),
        Spacer(),
        Heading("Landlord Details", bold=True),
        KeyValueLine("Name", fields.landlord_name),
        KeyValueLine("Address", fields.landlord_address),
        Spacer(),
        Heading("Tenant Details", bold=True),
        KeyValueLine("Name", fields.tenant_name),
        KeyValueLine("Address", fields.tenant_address),
        Spacer(),
        Heading("Property Details", bold=True),
        KeyValueLine("Address", fields.property_address),
        KeyValueLine("Tenancy Start Date", fields.tenancy_start),
        KeyValueLine("Notice End Date", fields.notice_end),
    ]
    if fields.reason:
        blocks.append(KeyValueLine(REASON_LABEL, fields.reason))
    blocks.extend(
        [
            Spacer(),
            Heading("Disclaimer", bold=True),
            Paragraph(DISCLAIMER_TEXT),
        ]
    )
    return blocks

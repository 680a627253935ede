"""
Notice document rendering: blocks -> flowing layout -> PDF bytes.
"""

from .blocks import (
    DISCLAIMER_TEXT,
    Align,
    Heading,
    KeyValueLine,
    Paragraph,
    Spacer,
    build_notice_blocks,
)
from .layout import LaidOutPage, NoticeLayout, PlacedLine, layout_blocks
from .pdf_writer import RenderFailure, RenderResult, render_notice, write_pdf

__all__ = [
    "DISCLAIMER_TEXT",
    "Align",
    "Heading",
    "KeyValueLine",
    "Paragraph",
    "Spacer",
    "build_notice_blocks",
    "LaidOutPage",
    "NoticeLayout",
    "PlacedLine",
    "layout_blocks",
    "RenderFailure",
    "RenderResult",
    "render_notice",
    "write_pdf",
]

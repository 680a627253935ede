"""
Notice PDF rendering.

`render_notice` is the single entry point used by the web layer and the CLI:
it resolves the notice type, builds the block sequence, lays it out and
draws it with a reportlab canvas into an in-memory buffer.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from reportlab.pdfgen import canvas

from src.notices.catalog import lookup
from src.notices.validation import FieldSet
from src.utils.config_loader import DocumentConfig

from .blocks import Align, build_notice_blocks
from .layout import PAGE_SIZES, LaidOutPage, NoticeLayout

logger = logging.getLogger(__name__)


class RenderFailure(RuntimeError):
    """The PDF could not be assembled."""


@dataclass(frozen=True)
class RenderResult:
    ok: bool
    content: bytes = b""
    error: Optional[str] = None
    page_count: int = 0

    def unwrap(self) -> bytes:
        if not self.ok:
            raise RenderFailure(self.error or "render failed")
        return self.content


def write_pdf(pages: List[LaidOutPage], cfg: DocumentConfig, *, title: str = "") -> bytes:
    """Draw laid out pages and return the finished PDF bytes.

    The canvas runs in invariant mode so output does not embed a creation
    timestamp or random document id.
    """
    if not pages:
        raise RenderFailure("no pages to write")

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=PAGE_SIZES[cfg.page_size], invariant=1)
    c.setTitle(title)
    c.setAuthor(cfg.author)
    c.setCreator(cfg.author)
    for page in pages:
        for line in page.lines:
            c.setFont(line.font, line.size)
            if line.align == Align.CENTER:
                c.drawCentredString(line.x, line.y, line.text)
            elif line.align == Align.END:
                c.drawRightString(line.x, line.y, line.text)
            else:
                c.drawString(line.x, line.y, line.text)
        c.showPage()
    c.save()
    return buffer.getvalue()


def render_notice(
    notice_type: str,
    fields: FieldSet,
    *,
    today: Optional[date] = None,
    config: Optional[DocumentConfig] = None,
) -> RenderResult:
    """Render a notice to PDF bytes.

    Empty fields render as empty slots. An unknown notice type raises
    InvalidNoticeType; any fault while assembling the PDF is logged and
    returned as a failed result, never as partial bytes.
    """
    notice = lookup(notice_type)
    cfg = config or DocumentConfig()

    blocks = build_notice_blocks(notice, fields, today=today)
    try:
        pages = NoticeLayout(cfg).add_blocks(blocks)
        content = write_pdf(pages, cfg, title=notice.name)
    except Exception as e:
        logger.error("PDF render failed for notice_type=%s: %s", notice_type, e, exc_info=True)
        return RenderResult(ok=False, error=str(e))

    logger.info("Rendered notice_type=%s pages=%d bytes=%d", notice_type, len(pages), len(content))
    return RenderResult(ok=True, content=content, page_count=len(pages))

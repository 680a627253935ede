"""
Flowing page layout for notice blocks.

Blocks are wrapped to the frame width using the font metrics reportlab uses
when drawing, then placed top to bottom. When the next line does not fit in
the remaining height a new page is started; block order is never changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.pdfbase.pdfmetrics import stringWidth

from src.utils.config_loader import DocumentConfig

from .blocks import Align, Block, Heading, Paragraph, Spacer, TextRole

PAGE_SIZES = {"A4": A4, "LETTER": LETTER}


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    margin: float

    @property
    def top(self) -> float:
        return self.height - self.margin

    @property
    def bottom(self) -> float:
        return self.margin

    @property
    def frame_width(self) -> float:
        return self.width - 2 * self.margin

    def anchor_x(self, align: Align) -> float:
        if align == Align.CENTER:
            return self.width / 2.0
        if align == Align.END:
            return self.width - self.margin
        return self.margin

    @classmethod
    def from_config(cls, cfg: DocumentConfig) -> "PageGeometry":
        width, height = PAGE_SIZES[cfg.page_size]
        return cls(width=width, height=height, margin=cfg.margin)


@dataclass(frozen=True)
class PlacedLine:
    text: str
    font: str
    size: float
    x: float
    y: float
    align: Align
    block_index: int


@dataclass
class LaidOutPage:
    number: int
    lines: List[PlacedLine] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


def wrap_text(text: str, font: str, size: float, max_width: float) -> List[str]:
    """Greedy word wrap on measured widths.

    Explicit newlines start a new line. A single word wider than the frame is
    broken between characters. Empty text yields one empty line so that a
    labelled slot is still drawn.
    """
    out: List[str] = []
    for raw_line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        words = raw_line.split()
        if not words:
            out.append("")
            continue
        cur = ""
        for w in words:
            trial = w if not cur else f"{cur} {w}"
            if stringWidth(trial, font, size) <= max_width:
                cur = trial
                continue
            if cur:
                out.append(cur)
            pieces = list(_split_long_word(w, font, size, max_width))
            out.extend(pieces[:-1])
            cur = pieces[-1]
        if cur:
            out.append(cur)
    return out


def _split_long_word(word: str, font: str, size: float, max_width: float) -> Iterable[str]:
    if stringWidth(word, font, size) <= max_width:
        yield word
        return
    piece = ""
    for ch in word:
        if piece and stringWidth(piece + ch, font, size) > max_width:
            yield piece
            piece = ch
        else:
            piece += ch
    if piece:
        yield piece


class NoticeLayout:
    """Places blocks onto pages for one document.

    Instances hold per-document cursor state and must not be shared between
    renders.
    """

    def __init__(self, cfg: DocumentConfig, geometry: Optional[PageGeometry] = None):
        self.cfg = cfg
        self.geometry = geometry or PageGeometry.from_config(cfg)
        self.pages: List[LaidOutPage] = []
        self._cursor = 0.0
        self._new_page()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------

    def _style(self, block: Block) -> Tuple[str, float]:
        size = self.cfg.body_font_size
        bold = False
        if isinstance(block, Heading):
            bold = block.bold
            if block.role == TextRole.TITLE:
                size = self.cfg.title_font_size
            elif block.role == TextRole.SUBTITLE:
                size = self.cfg.subtitle_font_size
        elif isinstance(block, Paragraph):
            bold = block.bold
        return (self.cfg.bold_font if bold else self.cfg.font), size

    def _leading(self, size: float) -> float:
        return size * self.cfg.line_spacing

    # ------------------------------------------------------------------
    # Page lifecycle
    # ------------------------------------------------------------------

    def _new_page(self) -> None:
        self.pages.append(LaidOutPage(number=len(self.pages) + 1))
        self._cursor = self.geometry.top

    @property
    def _page_is_empty(self) -> bool:
        return not self.pages[-1].lines

    def _remaining(self) -> float:
        return self._cursor - self.geometry.bottom

    def _ensure_room(self, height: float) -> None:
        # An empty page takes the line even if it is taller than the frame.
        if height > self._remaining() and not self._page_is_empty:
            self._new_page()

    def _place(self, text: str, font: str, size: float, align: Align, block_index: int) -> None:
        leading = self._leading(size)
        self._ensure_room(leading)
        baseline = self._cursor - size
        self.pages[-1].lines.append(
            PlacedLine(
                text=text,
                font=font,
                size=size,
                x=self.geometry.anchor_x(align),
                y=baseline,
                align=align,
                block_index=block_index,
            )
        )
        self._cursor -= leading

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _lines_for(self, block: Block) -> Tuple[List[str], str, float, Align]:
        font, size = self._style(block)
        text = block.text if not isinstance(block, Spacer) else ""
        align = getattr(block, "align", Align.START)
        return wrap_text(text, font, size, self.geometry.frame_width), font, size, align

    def _first_line_height(self, blocks: Sequence[Block], start: int) -> float:
        for block in blocks[start:]:
            if isinstance(block, Spacer):
                continue
            _, size = self._style(block)
            return self._leading(size)
        return 0.0

    def add_blocks(self, blocks: Sequence[Block]) -> List[LaidOutPage]:
        for index, block in enumerate(blocks):
            if isinstance(block, Spacer):
                if self._page_is_empty:
                    continue
                gap = block.lines * self._leading(self.cfg.body_font_size)
                # A gap that runs past the frame just exhausts the page.
                self._cursor = max(self._cursor - gap, self.geometry.bottom)
                continue

            lines, font, size, align = self._lines_for(block)
            if isinstance(block, Heading):
                # Keep a heading with the first line of what follows it.
                needed = len(lines) * self._leading(size) + self._first_line_height(blocks, index + 1)
                self._ensure_room(needed)
            for text in lines:
                self._place(text, font, size, align, index)
        return self.pages


def layout_blocks(blocks: Sequence[Block], cfg: Optional[DocumentConfig] = None) -> List[LaidOutPage]:
    """Lay out `blocks` and return the pages in order."""
    return NoticeLayout(cfg or DocumentConfig()).add_blocks(blocks)

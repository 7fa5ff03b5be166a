"""Paragraph grouping: raw text lines become <p> blocks, block fragments pass through"""

from typing import Iterable

from mdcomments.core.inline import format_inline
from mdcomments.core.models import Blank, Fragment, PreformattedBlock, RawText
from mdcomments.core.segment import Formatter


def render_blocks(fragments: Iterable[Fragment], fmt: Formatter = format_inline) -> list[PreformattedBlock]:
    """Turn fragments into finished HTML blocks, in order.

    Consecutive RawText lines are joined with single spaces and formatted
    once as a paragraph. The paragraph is closed by a Blank, by any block
    fragment, or by the end of the sequence. Blanks render nothing.
    """
    blocks: list[PreformattedBlock] = []
    paragraph: list[str] = []

    def flush() -> None:
        if paragraph:
            blocks.append(PreformattedBlock(html=f"<p>{fmt(' '.join(paragraph))}</p>"))
            paragraph.clear()

    for frag in fragments:
        if isinstance(frag, RawText):
            paragraph.append(frag.content)
            continue
        flush()
        if not isinstance(frag, Blank):
            blocks.append(PreformattedBlock(html=frag.html))

    flush()
    return blocks


def group(fragments: Iterable[Fragment], fmt: Formatter = format_inline) -> str:
    """Render fragments to the final HTML string, one block per line."""
    return '\n'.join(b.html for b in render_blocks(fragments, fmt))

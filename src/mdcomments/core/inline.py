"""Inline formatting: bold, italic, code spans and links inside one text span.

Constructs are rewritten in a fixed order: bold, italic, code, links. Each
rewritten construct is parked behind a placeholder so later steps never see
(or re-escape) HTML produced by an earlier one. Text captured inside a
construct is escaped once; text outside every construct is left as-is
unless ``escape_plain`` is set.
"""

import re
from typing import Callable, Optional

from mdcomments.core.utils.escape import escape_html


UrlSanitizer = Callable[[str], str]

BOLD_PATTERNS = (
    re.compile(r'\*\*(.*?)\*\*'),
    re.compile(r'__(.*?)__'),
)

# Not inside a word, not touching a neighbouring marker, no whitespace just
# inside the markers; a lone non-space character is valid content.
ITALIC_PATTERNS = (
    re.compile(r'(?<!\*)(?<!\w)\*([^*\s][^*]*?[^*\s]|[^*\s])\*(?!\*)(?!\w)'),
    re.compile(r'(?<!_)(?<!\w)_([^_\s][^_]*?[^_\s]|[^_\s])_(?!_)(?!\w)'),
)

CODE_PATTERN = re.compile(r'`([^`]*)`')

LINK_PATTERN = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')

_OPEN, _CLOSE = '\ue000', '\ue001'     # private-use code points
_SLOT_RE = re.compile(f'{_OPEN}([0-9]+){_CLOSE}')


class _Slots:
    """Placeholder table for constructs already rendered in this call."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, str]] = []     # (html, source)

    def park(self, html: str, source: str) -> str:
        self._entries.append((html, source))
        return f'{_OPEN}{len(self._entries) - 1}{_CLOSE}'

    def html(self, text: str) -> str:
        """Replace placeholders with their rendered HTML."""
        return _SLOT_RE.sub(lambda m: self.html(self._entries[int(m.group(1))][0]), text)

    def source(self, text: str) -> str:
        """Replace placeholders with the literal markdown they came from."""
        return _SLOT_RE.sub(lambda m: self.source(self._entries[int(m.group(1))][1]), text)


def format_inline(
    text: str,
    url_sanitizer: Optional[UrlSanitizer] = None,
    escape_plain: bool = False,
    ) -> str:
    """Rewrite bold/italic/code/link markers in text to HTML.

    url_sanitizer builds the href for link targets; without one the raw
    target is HTML-escaped. Unmatched markers are left as literal text.
    """
    slots = _Slots()
    text = text.replace(_OPEN, '').replace(_CLOSE, '')

    def wrap(tag: str) -> Callable[[re.Match], str]:
        return lambda m: slots.park(f'<{tag}>{escape_html(m.group(1))}</{tag}>', m.group(0))

    for pattern in BOLD_PATTERNS:
        text = pattern.sub(wrap('strong'), text)
    for pattern in ITALIC_PATTERNS:
        text = pattern.sub(wrap('em'), text)

    text = CODE_PATTERN.sub(
        lambda m: slots.park(f'<code>{escape_html(slots.source(m.group(1)))}</code>', m.group(0)),
        text,
    )

    def link(m: re.Match) -> str:
        target = slots.source(m.group(2))
        href = url_sanitizer(target) if url_sanitizer else escape_html(target)
        html = f'<a href="{href}" rel="nofollow">{escape_html(m.group(1))}</a>'
        return slots.park(html, m.group(0))

    text = LINK_PATTERN.sub(link, text)

    if escape_plain:
        text = escape_html(text)
    return slots.html(text)

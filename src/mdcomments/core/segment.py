"""Line classification into block fragments with open-list tracking"""

import re
from typing import Callable, Optional

from mdcomments.core.inline import format_inline
from mdcomments.core.models import (
    Blank,
    Fragment,
    Heading,
    ListClose,
    ListItem,
    ListKind,
    ListOpen,
    RawText,
)


Formatter = Callable[[str], str]

HEADING_RE = re.compile(r'^(#{1,6})\s+(.+)')
LIST_MARKERS: tuple[tuple[ListKind, re.Pattern], ...] = (
    (ListKind.unordered, re.compile(r'^[-*+–]\s+(.+)')),
    (ListKind.ordered,   re.compile(r'^[0-9]+\.\s+(.+)')),
)


def _list_item(line: str) -> tuple[Optional[ListKind], Optional[str]]:
    """Return (list kind, item text) if line starts with a list marker, else (None, None)."""
    for kind, pattern in LIST_MARKERS:
        m = pattern.match(line)
        if m:
            return kind, m.group(1).strip()
    return None, None


def segment(text: str, fmt: Formatter = format_inline) -> list[Fragment]:
    """Split text into a flat fragment list; heading and list item content is run through fmt."""
    fragments: list[Fragment] = []
    open_list: Optional[ListKind] = None

    def close_list() -> None:
        nonlocal open_list
        if open_list is not None:
            fragments.append(ListClose(list_kind=open_list))
            open_list = None

    for line in text.split('\n'):
        line = line.strip()

        if not line:
            close_list()
            fragments.append(Blank())
            continue

        if m := HEADING_RE.match(line):
            close_list()
            fragments.append(Heading(level=len(m.group(1)), content=fmt(m.group(2).strip())))
            continue

        kind, item = _list_item(line)
        if kind is not None:
            if open_list != kind:
                close_list()
                fragments.append(ListOpen(list_kind=kind))
                open_list = kind
            fragments.append(ListItem(content=fmt(item)))
            continue

        close_list()
        fragments.append(RawText(content=line))

    close_list()
    return fragments

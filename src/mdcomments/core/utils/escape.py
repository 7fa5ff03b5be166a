"""Minimal HTML entity escaping for user text"""

import re


# A bare ampersand: one that does not already start a named or numeric entity.
_BARE_AMP_RE = re.compile(r'&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)')


def escape_html(text: str) -> str:
    """Escape & < > " ' without double-encoding existing entities."""
    text = _BARE_AMP_RE.sub('&amp;', text)
    return (
        text.replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", '&#039;')
    )

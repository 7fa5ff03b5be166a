"""URL and HTML sanitizers applied around the markdown converter"""

import re

import bleach

from mdcomments.core.utils.escape import escape_html


ALLOWED_PROTOCOLS = frozenset(bleach.sanitizer.ALLOWED_PROTOCOLS) | {
    "http", "https", "ftp", "ftps", "mailto", "tel", "news", "irc",
}

ALLOWED_TAGS = frozenset({
    "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "strong", "em", "code", "a",
})

ALLOWED_ATTRIBUTES = {"a": ["href", "rel"]}

# A dotted host with a port (example.com:8080) is not a scheme.
_HOST_PORT_RE = re.compile(r"^[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)+:[0-9]+(?:[/?#]|$)")
_SCHEME_RE = re.compile(r'^([A-Za-z][A-Za-z0-9+.\-]*):')
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]+")


def sanitize_url(url: str) -> str:
    """Return an HTML-escaped href for url, or "" when its scheme is not allowed."""
    url = _CONTROL_CHARS_RE.sub("", url.strip()).replace(" ", "%20")
    if not url:
        return ''
    m = None if _HOST_PORT_RE.match(url) else _SCHEME_RE.match(url)
    if m:
        if m.group(1).lower() not in ALLOWED_PROTOCOLS:
            return ''
    elif not url.startswith(('/', '#', '?', '.')):
        url = f"http://{url}"
    return escape_html(url)


def sanitize_html(html: str) -> str:
    """Strip every tag and attribute the converter does not emit."""
    return bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )

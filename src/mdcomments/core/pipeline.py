"""Conversion entry points: comment text in, HTML out"""

import logging
from functools import partial
from pathlib import Path
from typing import Optional

from mdcomments.config import Settings
from mdcomments.core.files import discover_files
from mdcomments.core.group import group
from mdcomments.core.inline import UrlSanitizer, format_inline
from mdcomments.core.segment import Formatter, segment
from mdcomments.core.utils.sanitize import sanitize_html, sanitize_url


logger = logging.getLogger(__name__)

# Typographic substitutes a host may have applied before we see the text.
DASH_REPLACEMENTS = (('–', '-'), ('—', '--'))


def normalize_dashes(text: str) -> str:
    """Turn en dashes back into '-' and em dashes into '--'."""
    for smart, plain in DASH_REPLACEMENTS:
        text = text.replace(smart, plain)
    return text


def inline_formatter(url_sanitizer: Optional[UrlSanitizer] = None, escape_plain: bool = False) -> Formatter:
    """Bind format_inline options once for a whole conversion."""
    return partial(format_inline, url_sanitizer=url_sanitizer, escape_plain=escape_plain)


def markdown_to_html(
    text: str,
    url_sanitizer: Optional[UrlSanitizer] = None,
    escape_plain: bool = False,
    ) -> str:
    """Segment text into blocks and group them into the final HTML string."""
    fmt = inline_formatter(url_sanitizer, escape_plain)
    fragments = segment(text, fmt)
    logger.debug("Segmented %d line(s) into %d fragment(s)", text.count('\n') + 1, len(fragments))
    return group(fragments, fmt)


def convert_to_html(
    raw_text: str,
    settings: Settings = None,
    url_sanitizer: Optional[UrlSanitizer] = sanitize_url,
    ) -> str:
    """Convert comment markdown to HTML; returns raw_text untouched when conversion is disabled."""
    settings = settings or Settings()
    if not settings.enabled:
        return raw_text
    text = normalize_dashes(raw_text) if settings.normalize_dashes else raw_text
    return markdown_to_html(text, url_sanitizer, settings.escape_plain_text)


def render_comment(raw_text: str, settings: Settings = None) -> str:
    """Convert and, if configured, allow-list clean the result for display."""
    settings = settings or Settings()
    if not settings.enabled:            # passthrough skips the cleaner too
        return raw_text
    html = convert_to_html(raw_text, settings)
    return sanitize_html(html) if settings.sanitize_output else html


def run_build(
    path: str,
    output_dir: Path,
    settings: Settings,
    ) -> list[tuple[Path, Path]]:
    """Render every source file under path into output_dir. Returns (source, html_path) pairs.

    Output paths mirror the source layout relative to path:
      output_dir / <relative parent> / <stem>.html
    """
    root = Path(path)
    base = root if root.is_dir() else root.parent
    results = []
    for p in discover_files(root):
        try:
            html = render_comment(p.read_text(encoding='utf-8'), settings)
            out_file = output_dir / p.relative_to(base).with_suffix('.html')
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(html + '\n', encoding='utf-8')
            logger.debug("Rendered %s -> %s", p, out_file)
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
    return results

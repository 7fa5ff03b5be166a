"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdcomments.config import Settings, load_config
from mdcomments.core.pipeline import inline_formatter, normalize_dashes, render_comment, run_build
from mdcomments.core.segment import segment
from mdcomments.core.utils.sanitize import sanitize_url


STDIN = "-"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read_source(path: str) -> str:
    """Return the text of path, or of stdin when path is '-'."""
    if path == STDIN:
        return typer.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render, or - for stdin")] = STDIN,
    enabled: Annotated[Optional[bool], typer.Option("--enabled/--disabled", help="Toggle markdown conversion")] = None,
    sanitize: Annotated[Optional[bool], typer.Option("--sanitize/--no-sanitize", help="Allow-list clean the HTML")] = None,
    escape_plain: Annotated[Optional[bool], typer.Option("--escape-plain/--no-escape-plain", help="Escape text outside inline markup")] = None,
    ):
    """Render one comment to HTML on stdout."""
    settings = _settings(overrides={
        "enabled": enabled, "sanitize_output": sanitize, "escape_plain_text": escape_plain,
    })
    typer.echo(render_comment(_read_source(path), settings))


def segment_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to segment, or - for stdin")] = STDIN,
    ):
    """Print the block fragments for a comment as JSON."""
    settings = _settings()
    text = _read_source(path)
    if settings.normalize_dashes:
        text = normalize_dashes(text)
    fmt = inline_formatter(sanitize_url, settings.escape_plain_text)
    fragments = [f.model_dump(mode="json") for f in segment(text, fmt)]
    typer.echo(json.dumps(fragments, indent=2, ensure_ascii=False))


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    sanitize: Annotated[Optional[bool], typer.Option("--sanitize/--no-sanitize", help="Allow-list clean the HTML")] = None,
    ):
    """Render every .md/.markdown/.txt file under path to .html files."""
    settings = _settings(overrides={"output_dir": out, "sanitize_output": sanitize})
    if not Path(path).exists():
        _fail(f"No such file or directory: {path}")
    output_dir = Path(settings.output_dir)

    try:
        results = run_build(path, output_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No source files found under {path}.")
        raise typer.Exit(1)

    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} file(s) to {output_dir}/")


def syntax_cmd():
    """Print the supported markdown syntax."""
    typer.echo(_settings().help_text)

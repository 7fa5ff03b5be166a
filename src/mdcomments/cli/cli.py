"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdcomments.cli.commands import build_cmd, render_cmd, segment_cmd, syntax_cmd


app = typer.Typer(name="mdcomments", no_args_is_help=True, help="Comment markdown to HTML converter")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Convert the comment markdown subset (headings, lists, bold, italic, code, links) to HTML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="render")(render_cmd)
app.command(name="segment")(segment_cmd)
app.command(name="build")(build_cmd)
app.command(name="syntax")(syntax_cmd)

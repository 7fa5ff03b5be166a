"""Unit tests for core/group.py"""

from mdcomments.core.group import group, render_blocks
from mdcomments.core.models import (
    Blank,
    Heading,
    ListClose,
    ListItem,
    ListKind,
    ListOpen,
    PreformattedBlock,
    RawText,
)
from mdcomments.core.segment import segment


def test_heading_then_paragraph():
    assert group(segment("# Title\n\nBody text")) == "<h1>Title</h1>\n<p>Body text</p>"


def test_list_closed_before_paragraph():
    """The exact tag sequence for a list followed by a paragraph."""
    assert group(segment("- one\n- two\n\nPara")) == "<ul>\n<li>one</li>\n<li>two</li>\n</ul>\n<p>Para</p>"


def test_mixed_list_switch():
    assert group(segment("- a\n1. b")) == "<ul>\n<li>a</li>\n</ul>\n<ol>\n<li>b</li>\n</ol>"


def test_consecutive_lines_join_with_space():
    assert group(segment("line one\nline two")) == "<p>line one line two</p>"


def test_blank_line_separates_paragraphs():
    assert group(segment("a\n\nb")) == "<p>a</p>\n<p>b</p>"


def test_block_fragment_flushes_paragraph():
    assert group(segment("para\n# H")) == "<p>para</p>\n<h1>H</h1>"
    assert group(segment("para\n- item")) == "<p>para</p>\n<ul>\n<li>item</li>\n</ul>"


def test_blank_only_input_renders_nothing():
    assert group(segment("")) == ""
    assert group(segment("\n\n\n")) == ""


def test_inline_markup_may_span_lines():
    """Paragraph lines are joined before formatting, so markers can cross lines."""
    assert group(segment("**a\nb**")) == "<p><strong>a b</strong></p>"


def test_paragraph_formatted_once(recorder):
    """The formatter sees each paragraph exactly once, and never block fragments."""
    fragments = [
        RawText(content="a"),
        RawText(content="b"),
        Blank(),
        Heading(level=2, content="<em>x</em>"),
        RawText(content="c"),
    ]
    assert group(fragments, fmt=recorder) == "<p>a b</p>\n<h2><em>x</em></h2>\n<p>c</p>"
    assert recorder.calls == ["a b", "c"]


def test_list_fragments_render_literally():
    fragments = [
        ListOpen(list_kind=ListKind.ordered),
        ListItem(content="<code>x</code>"),
        ListClose(list_kind=ListKind.ordered),
    ]
    assert group(fragments) == "<ol>\n<li><code>x</code></li>\n</ol>"


def test_preformatted_block_passes_through():
    assert group([RawText(content="a"), PreformattedBlock(html="<hr>")]) == "<p>a</p>\n<hr>"


def test_render_blocks_returns_preformatted(sample_md):
    blocks = render_blocks(segment(sample_md))
    assert all(isinstance(b, PreformattedBlock) for b in blocks)
    assert blocks[0].html == "<h1>Welcome</h1>"
    assert blocks[1].html == "<p>Thanks for the <strong>great</strong> post. It helped a lot.</p>"
    assert blocks[-1].html == (
        '<p>See <a href="https://example.com/docs" rel="nofollow">the docs</a>'
        ' or run <code>pip install</code>.</p>'
    )

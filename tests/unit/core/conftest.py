"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Welcome

Thanks for the **great** post.
It helped a lot.

- first *point*
- second point
1. step one
2. step two

See [the docs](https://example.com/docs) or run `pip install`.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="recorder")
def recorder_fixture():
    """A formatter that records its inputs and returns them unchanged."""
    calls: list[str] = []

    def fmt(text: str) -> str:
        calls.append(text)
        return text

    fmt.calls = calls
    return fmt

"""Root test configuration: config isolation for CLI and config tests"""

import pytest

from mdcomments.config import Settings


@pytest.fixture(name="isolated_env")
def isolated_env_fixture(tmp_path, monkeypatch):
    """Empty working directory and no MDCOMMENTS_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDCOMMENTS_{name.upper()}", raising=False)
    return tmp_path

"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"

SYNTAX_HELP = (
    "You can use Markdown: **bold**, *italic*, `code`, [link](url), # headings, - lists"
)


class Settings(BaseModel):
    enabled:           bool = Field(default=True,  description="Convert markdown; False returns text unchanged")
    normalize_dashes:  bool = Field(default=True,  description="Turn typographic en/em dashes back into - and --")
    sanitize_output:   bool = Field(default=True,  description="Run the HTML allow-list cleaner over rendered output")
    escape_plain_text: bool = Field(default=False, description="Also escape text outside inline constructs")
    output_dir:        str  = Field(default="dist", description="Directory for rendered .html files")
    help_text:         str  = Field(default=SYNTAX_HELP, description="Syntax help shown next to comment forms")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDCOMMENTS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDCOMMENTS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

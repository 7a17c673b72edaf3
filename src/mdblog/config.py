"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    content_dir:       str = Field(default="content/posts", description="Directory holding the markdown posts")
    output_dir:        str = Field(default="dist", description="Directory for exported JSON + RSS files")
    parser_config:     str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    allow_html:        bool = Field(default=True, description="Pass raw HTML in posts through to the output")
    date_source:       str = Field(default="mtime", pattern="^(mtime|git|none)$", description="mtime, git or none")
    default_category:  str = Field(default="uncategorized", description="Category for posts without one")
    description_length: int = Field(default=50, ge=1, description="Max characters of an auto-generated description")
    chars_per_minute:  int = Field(default=400, ge=1, description="Reading speed used for reading-time estimates")
    site_url:          str = Field(default="", description="Public base URL; RSS is skipped when empty")
    site_title:        str = "mdblog"
    site_description:  str = ""
    post_path:         str = Field(default="#/article/{id}", description="Post URL path relative to site_url")
    feed_limit:        int = Field(default=0, ge=0, description="Max items in rss.xml; 0 = unlimited")
    recent_limit:      int = Field(default=8, ge=1, description="Length of the recently-viewed list")
    state_file:        str = Field(default=".mdblog/state.json", description="Local key/value state file")
    log_level:         str = Field(default="WARNING", description="Logging level name")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

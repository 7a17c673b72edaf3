"""Data models for parsed documents, posts, and table-of-contents entries"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Frontmatter values are one of these after coercion; see core/frontmatter.py.
FrontmatterValue = Union[bool, int, str, list[str]]


class TocItem(BaseModel):
    """A level-2 or level-3 heading with its anchor id."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    level: int = Field(..., ge=2, le=3)


class PostMeta(BaseModel):
    """Fully resolved post metadata; every field has a value after synthesis."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    date: str = ""                  # YYYY-MM-DD, or "" when unknown (sorts last)
    updated_at: str = ""
    category: str
    tags: tuple[str, ...] = ()
    description: str = ""
    reading_time: int = Field(default=1, ge=1)
    featured: bool = False


class Post(BaseModel):
    """A loaded post. Built once by the pipeline and treated as read-only."""
    model_config = ConfigDict(frozen=True)

    meta: PostMeta
    content: str                    # rendered HTML with heading ids
    raw: str                        # markdown body, used by search
    toc: tuple[TocItem, ...] = ()
    source_path: str = ""
    published_at: Optional[datetime] = None


@dataclass(frozen=True)
class ParsedDoc:
    """Internal parse result for one source file; not exported."""
    path:        Path
    stem:        str
    frontmatter: dict[str, FrontmatterValue]
    body:        str                # trimmed body (frontmatter stripped)

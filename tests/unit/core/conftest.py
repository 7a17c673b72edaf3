"""Shared fixtures for core unit tests"""

from datetime import datetime
from typing import Optional

import pytest

from mdblog.core.models import Post, PostMeta, TocItem


SAMPLE_MD = """\
---
title: Getting Started with Rust
date: 2024-05-01
category: Rust
tags: [rust, "tooling"]
featured: true
---

# Getting Started with Rust

Install the toolchain with `rustup` and you are ready.

## Installing

Run the installer.

### On Linux

Use your package manager.

![Ferris](https://example.com/ferris.png "Ferris the crab")
"""


def _make_post(
    post_id: str,
    date: str = "",
    title: Optional[str] = None,
    category: str = "uncategorized",
    tags: tuple = (),
    description: str = "",
    raw: str = "",
    featured: bool = False,
    published_at: Optional[datetime] = None,
    toc: tuple = (),
    ) -> Post:
    """Build a Post directly, bypassing the pipeline."""
    return Post(
        meta=PostMeta(
            id=post_id,
            title=title or post_id,
            date=date,
            category=category,
            tags=tuple(tags),
            description=description,
            featured=featured,
        ),
        content=f"<p>{raw}</p>",
        raw=raw,
        toc=tuple(toc),
        source_path=f"{post_id}.md",
        published_at=published_at,
    )


@pytest.fixture(name="posts")
def posts_fixture():
    return [
        _make_post("rust-intro", "2024-05-01", title="Intro to Rust", category="Rust",
                  tags=("rust", "beginner"), description="First steps", raw="Cargo and rustup."),
        _make_post("async-python", "2024-06-10", title="Async Python", category="Python",
                  tags=("python", "async"), raw="asyncio event loops", featured=True,
                  toc=(TocItem(id="event-loop", title="Event loop", level=2),)),
        _make_post("rust-traits", "2024-06-02", title="Traits", category="Rust",
                  tags=("rust",), raw="Trait objects and generics."),
        _make_post("notes", "", title="Loose notes", raw="nothing dated"),
    ]


@pytest.fixture(name="make_post")
def make_post_fixture():
    """Factory for ad-hoc posts: make_post(id, date, **fields)."""
    return _make_post


@pytest.fixture(name="sample_file")
def sample_file_fixture(tmp_path):
    """SAMPLE_MD written to <tmp>/posts/rust-start.md."""
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    f = posts_dir / "rust-start.md"
    f.write_text(SAMPLE_MD, encoding="utf-8")
    return f

"""Unit tests for core/pipeline.py"""

from datetime import datetime, timezone

from mdblog.config import Settings
from mdblog.core.parse import parse_file
from mdblog.core.pipeline import build_post, load_posts


def test_build_post_from_sample(sample_file):
    post = build_post(parse_file(sample_file), Settings(date_source="none"))
    meta = post.meta
    assert meta.id == "rust-start"
    assert meta.title == "Getting Started with Rust"
    assert meta.date == "2024-05-01"
    assert meta.category == "Rust"
    assert meta.tags == ("rust", "tooling")
    assert meta.featured is True
    assert post.source_path == str(sample_file)
    assert post.published_at == datetime(2024, 5, 1, tzinfo=timezone.utc)
    assert [(t.id, t.level) for t in post.toc] == [("installing", 2), ("on-linux", 3)]
    assert 'title="Ferris the crab"' in post.content


def test_build_post_uses_timestamps(sample_file):
    created = datetime(2024, 7, 1, 9, tzinfo=timezone.utc)
    updated = datetime(2024, 7, 9, 9, tzinfo=timezone.utc)
    post = build_post(parse_file(sample_file), Settings(), {str(sample_file): (created, updated)})
    assert post.meta.date == "2024-07-01"
    assert post.meta.updated_at == "2024-07-09"
    assert post.published_at == created


def test_build_post_settings_applied(sample_file):
    settings = Settings(date_source="none", description_length=7, allow_html=False)
    post = build_post(parse_file(sample_file), settings)
    assert post.meta.description == "Getting..."


def test_load_posts_explicit_path(sample_file):
    repo = load_posts(Settings(content_dir="does-not-matter", date_source="none"), sample_file.parent)
    assert repo.ids() == ["rust-start"]

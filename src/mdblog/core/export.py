"""Export: JSON artifacts for the front-end and the RSS file"""

import json
from pathlib import Path
from typing import Iterable

from mdblog.config import Settings
from mdblog.core.feed import build_rss
from mdblog.core.models import Post
from mdblog.core.repository import PostRepository


def post_summary(post: Post) -> dict:
    """The {meta, content, raw} record consumed by list and search views."""
    return {
        "meta": post.meta.model_dump(mode="json"),
        "content": post.content,
        "raw": post.raw,
    }


def post_detail(post: Post, related: Iterable[Post] = ()) -> dict:
    """A single article: summary record plus its table of contents and related posts."""
    return {
        **post_summary(post),
        "toc": [t.model_dump() for t in post.toc],
        "related": [p.meta.model_dump(mode="json") for p in related],
    }


def build_taxonomy(repo: PostRepository) -> dict:
    """Category, tag and month count maps."""
    return {
        "categories": repo.categories(),
        "tags": repo.tags(),
        "archive": {month: len(posts) for month, posts in repo.archive().items()},
    }


def post_json_path(output_dir: Path, post_id: str) -> Path:
    """Path of posts/<id>.json. Raises ValueError for ids that are not a single plain file name."""
    if Path(post_id).name != post_id or "\\" in post_id:
        raise ValueError(f"Post id {post_id!r} cannot be used as a file name")
    return output_dir / "posts" / f"{post_id}.json"


def _write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')
    return path


def write_posts(repo: PostRepository, output_dir: Path) -> list[Path]:
    """Write posts.json (sorted list) and posts/<id>.json for each post.

    Returns the written paths, posts.json first.
    """
    paths = [post_json_path(output_dir, p.meta.id) for p in repo]
    written = [_write_json(output_dir / "posts.json", [post_summary(p) for p in repo])]
    for post, path in zip(repo, paths):
        written.append(_write_json(path, post_detail(post, repo.related(post.meta.id))))
    return written


def write_taxonomy(repo: PostRepository, output_dir: Path) -> Path:
    return _write_json(output_dir / "taxonomy.json", build_taxonomy(repo))


def write_feed(repo: PostRepository, output_dir: Path, settings: Settings) -> Path:
    rss = build_rss(
        repo,
        site_url=settings.site_url,
        title=settings.site_title,
        description=settings.site_description,
        post_path=settings.post_path,
        limit=settings.feed_limit,
    )
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "rss.xml"
    path.write_text(rss, encoding='utf-8')
    return path

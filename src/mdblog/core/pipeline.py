"""Pipeline step functions: load posts into a repository, then build output files"""

from pathlib import Path
from typing import Optional

from mdblog.config import Settings
from mdblog.core.export import write_feed, write_posts, write_taxonomy
from mdblog.core.headings import index_headings
from mdblog.core.meta import synthesize_meta
from mdblog.core.models import ParsedDoc, Post
from mdblog.core.parse import discover_files, parse_file
from mdblog.core.render import render_markdown
from mdblog.core.repository import PostRepository
from mdblog.core.timestamps import Timestamps, collect_timestamps
from mdblog.log import logger


def build_post(doc: ParsedDoc, settings: Settings, timestamps: Optional[Timestamps] = None) -> Post:
    """Render, index and synthesize metadata for one parsed document."""
    html = render_markdown(doc.body, settings.parser_config, settings.allow_html)
    html, toc = index_headings(html)
    meta, published_at = synthesize_meta(
        doc,
        (timestamps or {}).get(str(doc.path)),
        default_category=settings.default_category,
        description_length=settings.description_length,
        chars_per_minute=settings.chars_per_minute,
    )
    return Post(
        meta=meta,
        content=html,
        raw=doc.body,
        toc=tuple(toc),
        source_path=str(doc.path),
        published_at=published_at,
    )


def load_posts(settings: Settings, path: Optional[Path] = None) -> PostRepository:
    """Parse every source file under path (default: settings.content_dir) exactly once."""
    files = discover_files(Path(path or settings.content_dir))
    timestamps = collect_timestamps(files, settings.date_source)
    posts = []
    for p in files:
        try:
            doc = parse_file(p)
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to load {p}: {e}") from e
        posts.append(build_post(doc, settings, timestamps))
        logger.debug("Loaded %s", p)
    repo = PostRepository(posts)
    logger.info("Loaded %d post(s) from %s", len(repo), path or settings.content_dir)
    return repo


def run_build(settings: Settings, path: Optional[Path] = None) -> list[Path]:
    """Load posts and write JSON + RSS into settings.output_dir. Returns written paths."""
    repo = load_posts(settings, path)
    output_dir = Path(settings.output_dir)
    written = write_posts(repo, output_dir)
    written.append(write_taxonomy(repo, output_dir))
    if settings.site_url:
        written.append(write_feed(repo, output_dir, settings))
    else:
        logger.info("site_url not set; skipping rss.xml")
    logger.info("Wrote %d file(s) to %s", len(written), output_dir)
    return written

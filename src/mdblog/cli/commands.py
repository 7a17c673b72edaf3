"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.feed import build_rss
from mdblog.core.models import Post
from mdblog.core.pipeline import load_posts, run_build
from mdblog.core.repository import PostRepository
from mdblog.log import setup_logging
from mdblog.state import LocalStore, RecentlyViewed, ThemePreference


ContentDir = Annotated[Optional[str], typer.Option("--content-dir", help="Directory holding the markdown posts")]
DateSource = Annotated[Optional[str], typer.Option("--date-source", help="Post date source: mtime, git or none")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
        setup_logging(settings.log_level)
    except ValueError as e:
        _fail(str(e))
    return settings


def _load(settings: Settings) -> PostRepository:
    """Load the repository; duplicate ids and unreadable files end the command."""
    try:
        return load_posts(settings)
    except (ValueError, RuntimeError) as e:
        _fail("Could not load posts", e)


def _echo_post(post: Post) -> None:
    meta = post.meta
    typer.echo(f"  {meta.date or '----------'}  {meta.id}  {meta.title}")


def build_cmd(
    content: ContentDir = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    site_url: Annotated[Optional[str], typer.Option("--site-url", help="Public base URL for RSS links")] = None,
    date_source: DateSource = None,
    ):
    """Load all posts and write posts.json, per-post JSON, taxonomy.json and rss.xml."""
    settings = _settings(overrides={
        "content_dir": content, "output_dir": out,
        "site_url": site_url, "date_source": date_source,
    })
    try:
        written = run_build(settings)
    except (ValueError, RuntimeError) as e:
        _fail("Build failed", e)
    for path in written:
        typer.echo(f"  {path}")
    typer.echo(f"Wrote {len(written)} file(s) to {settings.output_dir}/")


def list_cmd(
    content: ContentDir = None,
    category: Annotated[Optional[str], typer.Option("--category", help="Only posts in this category")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts with this tag")] = None,
    featured: Annotated[bool, typer.Option("--featured", help="Only featured posts")] = False,
    ):
    """List posts, newest first."""
    repo = _load(_settings(overrides={"content_dir": content}))
    posts = repo.all()
    if category:
        posts = [p for p in posts if p.meta.category == category]
    if tag:
        posts = [p for p in posts if tag in p.meta.tags]
    if featured:
        posts = [p for p in posts if p.meta.featured]
    if not posts:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for post in posts:
        _echo_post(post)


def show_cmd(
    post_id: Annotated[str, typer.Argument(help="Post id")],
    content: ContentDir = None,
    ):
    """Show a post's metadata and table of contents, and mark it as recently viewed."""
    settings = _settings(overrides={"content_dir": content})
    repo = _load(settings)
    post = repo.get(post_id)
    if post is None:
        typer.echo(f"Post not found: {post_id}")
        raise typer.Exit(1)

    meta = post.meta
    typer.echo(meta.title)
    typer.echo(f"  date: {meta.date or '-'}  category: {meta.category}  reading time: {meta.reading_time} min")
    if meta.tags:
        typer.echo(f"  tags: {', '.join(meta.tags)}")
    if meta.description:
        typer.echo(f"  {meta.description}")
    for item in post.toc:
        indent = "  " * (item.level - 1)
        typer.echo(f"{indent}- {item.title}  #{item.id}")
    related = repo.related(meta.id)
    if related:
        typer.echo("Related:")
        for other in related:
            _echo_post(other)

    recent = RecentlyViewed(LocalStore(Path(settings.state_file)), settings.recent_limit)
    recent.load()
    recent.push(meta.id)
    recent.save()


def search_cmd(
    query: Annotated[str, typer.Argument(help="Case-insensitive substring to look for")],
    content: ContentDir = None,
    ):
    """Find posts whose title, description, tags, category or body contain the query."""
    result = _load(_settings(overrides={"content_dir": content})).search(query)
    if not result.searched:
        typer.echo("Empty query; nothing searched.")
        raise typer.Exit(1)
    if not result.posts:
        typer.echo(f"No posts match '{query}'.")
        raise typer.Exit(1)
    for post in result.posts:
        _echo_post(post)
    typer.echo(f"{len(result)} match(es)")


def _echo_counts(counts: dict[str, int]) -> None:
    if not counts:
        typer.echo("Nothing found.")
        raise typer.Exit(1)
    for name, count in counts.items():
        typer.echo(f"  {name} ({count})")


def tags_cmd(content: ContentDir = None):
    """List tags with post counts."""
    _echo_counts(_load(_settings(overrides={"content_dir": content})).tags())


def categories_cmd(content: ContentDir = None):
    """List categories with post counts."""
    _echo_counts(_load(_settings(overrides={"content_dir": content})).categories())


def archive_cmd(content: ContentDir = None):
    """List posts grouped by month."""
    months = _load(_settings(overrides={"content_dir": content})).archive()
    if not months:
        typer.echo("No dated posts found.")
        raise typer.Exit(1)
    for month, posts in months.items():
        typer.echo(f"{month} ({len(posts)})")
        for post in posts:
            _echo_post(post)


def feed_cmd(
    content: ContentDir = None,
    site_url: Annotated[Optional[str], typer.Option("--site-url", help="Public base URL for RSS links")] = None,
    date_source: DateSource = None,
    ):
    """Print the RSS 2.0 feed to stdout."""
    settings = _settings(overrides={"content_dir": content, "site_url": site_url, "date_source": date_source})
    if not settings.site_url:
        _fail("site_url is not set (use --site-url, MDBLOG_SITE_URL or config.yaml)")
    repo = _load(settings)
    typer.echo(build_rss(
        repo,
        site_url=settings.site_url,
        title=settings.site_title,
        description=settings.site_description,
        post_path=settings.post_path,
        limit=settings.feed_limit,
    ))


def recent_cmd(
    content: ContentDir = None,
    clear: Annotated[bool, typer.Option("--clear", help="Forget recently viewed posts")] = False,
    ):
    """List recently viewed posts, most recent first."""
    settings = _settings(overrides={"content_dir": content})
    recent = RecentlyViewed(LocalStore(Path(settings.state_file)), settings.recent_limit)
    if clear:
        recent.clear()
        typer.echo("Recently viewed list cleared.")
        return
    ids = recent.load()
    if not ids:
        typer.echo("No recently viewed posts.")
        return
    repo = _load(settings)
    for post_id in ids:
        post = repo.get(post_id)
        if post is not None:
            _echo_post(post)


def theme_cmd(
    theme: Annotated[Optional[str], typer.Argument(help="light or dark; omit to show the current value")] = None,
    clear: Annotated[bool, typer.Option("--clear", help="Reset to the system default")] = False,
    ):
    """Show or set the preferred colour theme."""
    settings = _settings()
    pref = ThemePreference(LocalStore(Path(settings.state_file)))
    if clear:
        pref.clear()
        typer.echo("Theme reset to system default.")
        return
    if theme is None:
        typer.echo(pref.load() or "system")
        return
    try:
        pref.save(theme)
    except ValueError as e:
        _fail(str(e))
    typer.echo(f"Theme set to {theme}.")

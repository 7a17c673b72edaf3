"""Metadata synthesis: frontmatter first, then derived values, then defaults"""

from datetime import date, datetime, time, timezone
from typing import Optional

from mdblog.core.models import FrontmatterValue, ParsedDoc, PostMeta
from mdblog.core.text import estimate_reading_time, summarize
from mdblog.core.timestamps import format_date


DEFAULT_CATEGORY = "uncategorized"
READING_TIME_KEYS = ("readingTime", "reading_time")


def _text(value: Optional[FrontmatterValue]) -> str:
    """String view of a scalar frontmatter value; "" for missing, bool or list values."""
    if isinstance(value, bool) or value is None or isinstance(value, list):
        return ""
    return str(value).strip()


def _reading_time(frontmatter: dict[str, FrontmatterValue]) -> Optional[int]:
    for key in READING_TIME_KEYS:
        value = frontmatter.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
    return None


def parse_date(value: str) -> Optional[datetime]:
    """Midnight UTC of a YYYY-MM-DD prefix, or None if value does not start with one."""
    try:
        return datetime.combine(date.fromisoformat(value[:10]), time(), tzinfo=timezone.utc)
    except ValueError:
        return None


def synthesize_meta(
    doc: ParsedDoc,
    timestamps: Optional[tuple[datetime, datetime]] = None,
    default_category: str = DEFAULT_CATEGORY,
    description_length: int = 50,
    chars_per_minute: int = 400,
    ) -> tuple[PostMeta, Optional[datetime]]:
    """Resolve every PostMeta field for a parsed document.

    Returns (meta, published_at). The file timestamp wins over a frontmatter
    date; a frontmatter date that doesn't start with YYYY-MM-DD counts as
    missing. The auto-generated description wins over a frontmatter one
    unless it comes out empty. published_at is the created timestamp when
    known, otherwise the frontmatter date at midnight UTC, otherwise None.
    """
    fm = doc.frontmatter
    created, updated = timestamps if timestamps else (None, None)

    fm_date = parse_date(_text(fm.get("date")))
    post_date = format_date(created) or format_date(fm_date)
    published_at = created or fm_date
    tags = fm.get("tags")

    meta = PostMeta(
        id=_text(fm.get("id")) or doc.stem,
        title=_text(fm.get("title")) or doc.stem,
        date=post_date,
        updated_at=format_date(updated) or format_date(parse_date(_text(fm.get("updated")))) or post_date,
        category=_text(fm.get("category")) or default_category,
        tags=tuple(tags) if isinstance(tags, list) else (),
        description=summarize(doc.body, description_length) or _text(fm.get("description")),
        reading_time=_reading_time(fm) or estimate_reading_time(doc.body, chars_per_minute),
        featured=fm.get("featured") is True,
    )
    return meta, published_at

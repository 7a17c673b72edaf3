"""Query-time substring search over loaded posts"""

from typing import Iterable

from pydantic import BaseModel, Field

from mdblog.core.models import Post


class SearchResult(BaseModel):
    """Matches for a query. searched is False for a blank query (nothing was searched)."""
    query: str
    posts: list[Post] = Field(default_factory=list)

    @property
    def searched(self) -> bool:
        return bool(self.query.strip())

    def __len__(self) -> int:
        return len(self.posts)


def matches(post: Post, needle: str) -> bool:
    """True if needle (already lower-cased) occurs in any searchable field of post."""
    meta = post.meta
    return (
        needle in meta.title.lower()
        or needle in meta.description.lower()
        or any(needle in tag.lower() for tag in meta.tags)
        or needle in meta.category.lower()
        or needle in post.raw.lower()
    )


def search(posts: Iterable[Post], query: str) -> SearchResult:
    """Case-insensitive, unranked substring match; repository order is kept."""
    needle = query.strip().lower()
    if not needle:
        return SearchResult(query=query)
    return SearchResult(query=query, posts=[p for p in posts if matches(p, needle)])

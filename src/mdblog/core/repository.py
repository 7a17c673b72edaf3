"""In-memory post repository: sorted collection plus read-only lookups and groupings"""

from collections import Counter
from typing import Iterable, Iterator, Optional

from mdblog.core.models import Post, TocItem
from mdblog.core.search import SearchResult, search


class DuplicatePostError(ValueError):
    """Two source files resolved to the same post id."""

    def __init__(self, post_id: str, first: str, second: str):
        super().__init__(f"Duplicate post id {post_id!r}: {first} and {second}")
        self.post_id = post_id


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Newest first by date string; ties keep input order, empty dates sort last."""
    return sorted(posts, key=lambda p: p.meta.date, reverse=True)


class PostRepository:
    """The loaded post list. Nothing mutates it after construction."""

    def __init__(self, posts: Iterable[Post]):
        posts = list(posts)
        seen: dict[str, str] = {}
        for post in posts:
            if post.meta.id in seen:
                raise DuplicatePostError(post.meta.id, seen[post.meta.id], post.source_path)
            seen[post.meta.id] = post.source_path
        self._posts: tuple[Post, ...] = tuple(sort_posts(posts))

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def all(self) -> list[Post]:
        return list(self._posts)

    def ids(self) -> list[str]:
        return [p.meta.id for p in self._posts]

    def get(self, post_id: str) -> Optional[Post]:
        """Return the post with post_id, or None if not found."""
        for post in self._posts:
            if post.meta.id == post_id:
                return post
        return None

    def toc(self, post_id: str) -> Optional[list[TocItem]]:
        post = self.get(post_id)
        return list(post.toc) if post else None

    def featured(self) -> list[Post]:
        return [p for p in self._posts if p.meta.featured]

    def by_category(self, category: str) -> list[Post]:
        return [p for p in self._posts if p.meta.category == category]

    def by_tag(self, tag: str) -> list[Post]:
        return [p for p in self._posts if tag in p.meta.tags]

    def categories(self) -> dict[str, int]:
        """Post count per category, in order of first appearance."""
        return dict(Counter(p.meta.category for p in self._posts))

    def tags(self) -> dict[str, int]:
        """Post count per tag, most used first; ties keep order of first appearance.

        A post counts once for each distinct tag it has.
        """
        counts = Counter(t for p in self._posts for t in dict.fromkeys(p.meta.tags))
        return dict(counts.most_common())

    def related(self, post_id: str, limit: int = 4) -> list[Post]:
        """Up to limit other posts in the same category, in repository order."""
        post = self.get(post_id)
        if post is None:
            return []
        return [
            p for p in self._posts
            if p.meta.category == post.meta.category and p.meta.id != post_id
        ][:limit]

    def archive(self) -> dict[str, list[Post]]:
        """Posts grouped by YYYY-MM of their date, newest month first. Undated posts are left out."""
        months: dict[str, list[Post]] = {}
        for post in self._posts:
            month = post.meta.date[:7]
            if month:
                months.setdefault(month, []).append(post)
        return months

    def search(self, query: str) -> SearchResult:
        return search(self._posts, query)

"""Heading anchors and table of contents for rendered post HTML"""

import html
import re

from mdblog.core.models import TocItem
from mdblog.core.utils.slug import anchor_slug


HEADING_RE = re.compile(r"<h([23])[^>]*>(.*?)</h\1>", re.IGNORECASE | re.DOTALL)
TAG_RE = re.compile(r"<[^>]*>")


def heading_text(inner_html: str) -> str:
    """Plain display text of a heading's inner HTML."""
    return html.unescape(TAG_RE.sub("", inner_html)).strip()


def index_headings(content: str) -> tuple[str, list[TocItem]]:
    """Inject id attributes into every h2/h3 and return (html, toc) in document order.

    Ids come from anchor_slug(text); an empty slug falls back to heading-<n>,
    n being the heading's zero-based position in the toc. Repeated slugs are
    left as-is.
    """
    toc: list[TocItem] = []

    def _replace(match: re.Match) -> str:
        level, inner = match.group(1), match.group(2)
        text = heading_text(inner)
        anchor = anchor_slug(text) or f"heading-{len(toc)}"
        toc.append(TocItem(id=anchor, title=text, level=int(level)))
        return f'<h{level} id="{anchor}">{inner}</h{level}>'

    return HEADING_RE.sub(_replace, content), toc

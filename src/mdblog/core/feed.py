"""RSS 2.0 feed generation"""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable
from urllib.parse import quote

from mdblog.core.models import Post


_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def post_url(site_url: str, post_id: str, post_path: str = "#/article/{id}") -> str:
    """Absolute URL of a post: site_url joined with post_path filled in."""
    return f"{site_url.rstrip('/')}/{post_path.format(id=quote(post_id))}"


def feed_order(posts: Iterable[Post]) -> list[Post]:
    """Newest published_at first; posts without one go last, in input order."""
    return sorted(posts, key=lambda p: p.published_at or _OLDEST, reverse=True)


def build_rss(
    posts: Iterable[Post],
    site_url: str,
    title: str,
    description: str = "",
    post_path: str = "#/article/{id}",
    limit: int = 0,
    ) -> str:
    """Return an RSS 2.0 document with one <item> per post, newest first.

    limit caps the number of items (0 = unlimited). Element text is escaped
    by ElementTree.
    """
    items = feed_order(posts)[:limit or None]

    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = title
    ET.SubElement(channel, "link").text = site_url
    ET.SubElement(channel, "description").text = description
    dated = [p.published_at for p in items if p.published_at]
    if dated:
        ET.SubElement(channel, "lastBuildDate").text = format_datetime(max(dated))

    for post in items:
        link = post_url(site_url, post.meta.id, post_path)
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = post.meta.title
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid").text = link
        if post.published_at:
            ET.SubElement(item, "pubDate").text = format_datetime(post.published_at)
        ET.SubElement(item, "description").text = post.meta.description

    ET.indent(rss)
    return ET.tostring(rss, encoding="utf-8", xml_declaration=True).decode("utf-8")

"""Markdown -> HTML rendering with markdown-it and a custom image rule"""

import re
from functools import lru_cache

from markdown_it import MarkdownIt


_ABSOLUTE_HTTP_RE = re.compile(r"^https?://", re.IGNORECASE)


def escape_attr(value: str) -> str:
    """Escape a string for use inside a double-quoted HTML attribute."""
    return (
        value.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _render_image(self, tokens, idx, options, env) -> str:
    """Renderer rule: lazy, async-decoded <img>; no-referrer for remote sources."""
    token = tokens[idx]
    href = token.attrGet("src") or ""
    title = token.attrGet("title")
    alt = self.renderInlineAsText(token.children or [], options, env)

    attrs = f'src="{escape_attr(href)}" alt="{escape_attr(alt)}" loading="lazy" decoding="async"'
    if _ABSOLUTE_HTTP_RE.match(href):
        attrs += ' referrerpolicy="no-referrer"'
    if title:
        attrs += f' title="{escape_attr(title)}"'
    return f"<img {attrs} />"


@lru_cache(maxsize=None)
def make_parser(preset: str = "gfm-like", allow_html: bool = True) -> MarkdownIt:
    """Build (and cache) a MarkdownIt instance for the given preset name."""
    md = MarkdownIt(preset, options_update={"linkify": False, "html": allow_html})
    md.add_render_rule("image", _render_image)
    return md


def render_markdown(body: str, preset: str = "gfm-like", allow_html: bool = True) -> str:
    """Render a markdown body to HTML. Malformed markdown degrades to literal text."""
    return make_parser(preset, allow_html).render(body)

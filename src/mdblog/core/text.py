"""Plain-text heuristics over markdown: descriptions and reading time"""

import math
import re


FENCE_RE = re.compile(r"```.*?```", re.DOTALL)
INLINE_CODE_RE = re.compile(r"`[^`]*`")
IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]*\)")
HTML_TAG_RE = re.compile(r"<[^>]+>")
MARKUP_CHARS_RE = re.compile(r"[#>*_|~-]")
READING_PUNCT_RE = re.compile(r"[#*`\[\]()!<>]")
WHITESPACE_RE = re.compile(r"\s+")

ELLIPSIS = "..."


def markdown_to_plain(markdown: str) -> str:
    """Strip code, images, link targets, tags and markdown punctuation; collapse whitespace."""
    text = FENCE_RE.sub(" ", markdown)
    text = INLINE_CODE_RE.sub(" ", text)
    text = IMAGE_RE.sub(" ", text)
    text = LINK_RE.sub(r"\1", text)
    text = HTML_TAG_RE.sub(" ", text)
    text = MARKUP_CHARS_RE.sub(" ", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def summarize(markdown: str, max_length: int = 50) -> str:
    """First max_length plain-text characters of the body, with an ellipsis if cut."""
    plain = markdown_to_plain(markdown)
    if len(plain) <= max_length:
        return plain
    return plain[:max_length] + ELLIPSIS


def estimate_reading_time(markdown: str, chars_per_minute: int = 400) -> int:
    """Minutes to read the body at chars_per_minute, code blocks excluded. Never below 1."""
    stripped = READING_PUNCT_RE.sub("", FENCE_RE.sub("", markdown))
    return max(1, math.ceil(len(stripped) / chars_per_minute))

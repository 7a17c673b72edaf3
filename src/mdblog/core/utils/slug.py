"""Slug generation for heading anchors"""

import re


# Word characters are ASCII-only; CJK ideographs are kept explicitly.
_DISALLOWED_RE = re.compile(r'[^\w\u4e00-\u9fff-]', re.ASCII)


def anchor_slug(text: str) -> str:
    """Lowercase text, join whitespace runs with '-', drop anything but word chars, CJK and '-'."""
    text = re.sub(r'\s+', '-', text.strip().lower())
    return _DISALLOWED_RE.sub('', text)

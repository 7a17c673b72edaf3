"""Frontmatter extraction: a `---` delimited block of `key: value` lines

Values are coerced into the FrontmatterValue union, first rule wins:
  [a, "b"]        -> list of trimmed, unquoted strings
  true / false    -> bool
  digits only     -> int
  anything else   -> str with surrounding quotes removed
"""

import re

from mdblog.core.models import FrontmatterValue


DELIMITER = "---"

_DIGITS_RE = re.compile(r"[0-9]+")
_QUOTES_RE = re.compile(r"^[\"']|[\"']$")


def _unquote(text: str) -> str:
    """Drop one leading and one trailing quote character, if present."""
    return _QUOTES_RE.sub("", text)


def coerce_value(text: str) -> FrontmatterValue:
    """Type a raw frontmatter value string."""
    text = text.strip()
    if text.startswith("[") and text.endswith("]"):
        inner = text[1:-1]
        if not inner.strip():
            return []
        return [_unquote(item.strip()) for item in inner.split(",")]
    if text == "true":
        return True
    if text == "false":
        return False
    if _DIGITS_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Past the interpreter's int string conversion limit.
            return text
    return _unquote(text)


def _split_block(text: str) -> tuple[list[str], str] | None:
    """Return (block_lines, body) if text opens with a closed `---` block, else None."""
    lines = text.split("\n")
    if lines[0].rstrip("\r") != DELIMITER:
        return None
    for i in range(1, len(lines)):
        if lines[i].rstrip("\r") == DELIMITER:
            return lines[1:i], "\n".join(lines[i + 1:])
    return None


def parse_frontmatter(text: str) -> tuple[dict[str, FrontmatterValue], str]:
    """Return (frontmatter, trimmed_body). Without a closed block the whole text is the body."""
    split = _split_block(text)
    if split is None:
        return {}, text.strip()

    block, body = split
    data: dict[str, FrontmatterValue] = {}
    for line in block:
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        data[key] = coerce_value(value)
    return data, body.strip()


def _dump_value(value: FrontmatterValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(str(v) for v in value) + "]"
    text = str(value)
    # Quote strings that would otherwise be read back as another type.
    if coerce_value(text) != text or text != text.strip():
        return f'"{text}"'
    return text


def dump_frontmatter(frontmatter: dict[str, FrontmatterValue], body: str) -> str:
    """Serialize frontmatter + body into a document parse_frontmatter reads back."""
    if not frontmatter:
        return body
    lines = [f"{key}: {_dump_value(value)}" for key, value in frontmatter.items()]
    return "\n".join([DELIMITER, *lines, DELIMITER, body])

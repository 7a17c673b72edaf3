"""File discovery and frontmatter extraction for post sources"""

from pathlib import Path

from mdblog.core.frontmatter import parse_frontmatter
from mdblog.core.models import ParsedDoc


MD_EXTENSIONS = {'.md', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS and p.is_file())


def parse_text(raw: str, path: Path) -> ParsedDoc:
    """Split raw document text into frontmatter + body for the given source path."""
    frontmatter, body = parse_frontmatter(raw)
    return ParsedDoc(path=path, stem=path.stem, frontmatter=frontmatter, body=body)


def parse_file(path: Path) -> ParsedDoc:
    """Read and parse a single markdown file."""
    return parse_text(path.read_text(encoding='utf-8'), path)

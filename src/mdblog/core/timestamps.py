"""File timestamp sources: filesystem mtime and git history

Each source maps a source path (as str) to a (created, updated) pair of
timezone-aware datetimes. Paths a source knows nothing about are omitted.
"""

import subprocess
from datetime import datetime
from pathlib import Path
from typing import Iterable

from mdblog.log import logger


Timestamps = dict[str, tuple[datetime, datetime]]

DATE_SOURCES = ("mtime", "git", "none")


def mtime_timestamps(paths: Iterable[Path]) -> Timestamps:
    """Use the filesystem modification time for both created and updated."""
    result: Timestamps = {}
    for p in paths:
        try:
            ts = datetime.fromtimestamp(p.stat().st_mtime).astimezone()
        except OSError as e:
            logger.warning("No mtime for %s: %s", p, e)
            continue
        result[str(p)] = (ts, ts)
    return result


def _git_log_dates(path: Path) -> list[datetime]:
    """Commit dates touching path, newest first. Empty when untracked or git is missing."""
    try:
        out = subprocess.check_output(
            ["git", "log", "--follow", "--format=%cI", "--", path.name],
            cwd=str(path.parent),
            stderr=subprocess.DEVNULL,
        ).decode().strip()
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug("git log failed for %s: %s", path, e)
        return []
    return [datetime.fromisoformat(line) for line in out.splitlines() if line.strip()]


def git_timestamps(paths: Iterable[Path]) -> Timestamps:
    """created = first commit touching the file, updated = latest commit."""
    result: Timestamps = {}
    for p in paths:
        dates = _git_log_dates(p)
        if dates:
            result[str(p)] = (dates[-1], dates[0])
    return result


def collect_timestamps(paths: Iterable[Path], source: str = "mtime") -> Timestamps:
    """Dispatch on date_source. git falls back to mtime for files without history."""
    paths = list(paths)
    if source == "none":
        return {}
    if source == "mtime":
        return mtime_timestamps(paths)
    if source == "git":
        found = git_timestamps(paths)
        missing = [p for p in paths if str(p) not in found]
        if missing:
            logger.info("No git history for %d file(s); using mtime", len(missing))
            found.update(mtime_timestamps(missing))
        return found
    raise ValueError(f"Unknown date source: {source!r} (expected one of {', '.join(DATE_SOURCES)})")


def format_date(ts: datetime | None) -> str:
    """YYYY-MM-DD for a timestamp, or "" when missing."""
    return ts.strftime("%Y-%m-%d") if ts else ""

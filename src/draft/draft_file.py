"""
Maintenance of the plain-text draft file the report is written in.

Fetched issues are stored as comment lines. Every refresh purges the old
comment lines first, so only the latest fetch is present.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..tracker.models import IssueRef

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def purge_comments(path: Path) -> int:
    """
    Drop comment lines from ``path`` in place, creating the file if missing.

    Returns the number of removed lines.
    """
    path.touch(exist_ok=True)
    with path.open("r", encoding="utf-8", newline="") as fh:
        lines = fh.readlines()

    kept = [line for line in lines if not line.startswith(COMMENT_PREFIX)]
    if kept and not kept[-1].endswith(("\n", "\r")):
        kept[-1] += "\n"

    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.writelines(kept)

    removed = len(lines) - len(kept)
    LOGGER.debug("Purged %s comment lines from %s", removed, path)
    return removed


def append_issues(path: Path, issues: Iterable[IssueRef]) -> int:
    """Append one comment line per issue. Returns the number of lines written."""
    written = 0
    with path.open("a", encoding="utf-8") as fh:
        for issue in issues:
            fh.write(f"{COMMENT_PREFIX}{issue.to_line()}\n")
            written += 1
    return written


def refresh_draft(path: Path, issues: Iterable[IssueRef]) -> None:
    """Replace the draft's comment lines with the given issues."""
    purge_comments(path)
    written = append_issues(path, issues)
    LOGGER.info("Draft %s refreshed with %s tracker issues.", path, written)


def read_draft(path: Path) -> str:
    return path.read_text(encoding="utf-8")

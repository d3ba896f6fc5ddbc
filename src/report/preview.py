"""Dry-run sink: show the report in a browser instead of mailing it."""

from __future__ import annotations

import logging
import shlex
import subprocess
import tempfile
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def write_preview_file(report: str) -> Path:
    """Write the report wrapped in ``<html>`` to a new temp file and return its path."""
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", suffix=".html", prefix="daily-report-", delete=False
    ) as fh:
        fh.write("<html>" + report + "</html>")
    return Path(fh.name)


class ReportPreviewer:
    """Opens the rendered report with an external viewer; the temp file is left behind."""

    def __init__(self, viewer: str) -> None:
        self.viewer = viewer

    def preview(self, report: str) -> Path:
        path = write_preview_file(report)
        cmd = [*shlex.split(self.viewer), str(path)]
        LOGGER.info("Opening preview %s", path)
        subprocess.run(cmd, check=True)
        return path

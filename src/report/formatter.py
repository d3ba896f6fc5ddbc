"""
Convert the edited draft into the HTML mail report.

Each line is classified by prefix. The first matching rule wins, in this order:

1. task prefix from the config: linked issue in bold
2. ``OTHER ``: plain bullet
3. comment marker: dropped
4. anything else, blank lines included: nested circle bullet
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List

from ..config import ReportConfig
from ..draft.draft_file import COMMENT_PREFIX
from .models import LineKind, ReportLine

LOGGER = logging.getLogger(__name__)

OTHER_PREFIX = "OTHER "
DATE_FORMAT = "%d.%m.%Y"


def classify_line(line: str, task_prefix: str) -> ReportLine:
    if line.startswith(task_prefix):
        key, _, rest = line.partition(" ")
        return ReportLine(kind=LineKind.TASK, text=rest, key=key)
    if line.startswith(OTHER_PREFIX):
        return ReportLine(kind=LineKind.OTHER, text=line[len(OTHER_PREFIX):])
    if line.startswith(COMMENT_PREFIX):
        return ReportLine(kind=LineKind.COMMENT, text=line)
    return ReportLine(kind=LineKind.DEFAULT, text=line)


def render_line(line: ReportLine, tracker_host: str) -> str:
    if line.kind is LineKind.TASK:
        link = f'<a href="{tracker_host}browse/{line.key}">{line.key}</a>'
        tail = f" {line.text}" if line.text else ""
        return f"<li><b>{link}{tail}</b></li>"
    if line.kind is LineKind.OTHER:
        return f"<li>{line.text}</li>"
    if line.kind is LineKind.COMMENT:
        return ""
    return f'<ul type="circle"><li>{line.text}</li></ul>'


def render_header(config: ReportConfig, recipient: str, date_label: str) -> str:
    return (
        f"From: {config.report.author_name}<{config.my_email}>\n"
        f"To: {recipient}\n"
        f"Subject: {config.report.subject_prefix}{date_label}\n"
        "MIME-Version: 1.0\n"
        "Content-Type: text/html; charset=UTF-8\n"
    )


def render_signature(config: ReportConfig) -> str:
    return f"\n<br><br>--<br>{config.report.closing}<br>{config.report.author_name}"


def generate_report(config: ReportConfig, text: str, recipient: str, date_label: str) -> str:
    """Build the full message (mail headers plus HTML body) from draft text."""
    parts: List[str] = [render_header(config, recipient, date_label), '<ul type="disc">']

    for raw in text.strip().split("\n"):
        line = classify_line(raw, config.report.task_prefix)
        LOGGER.debug("Line classified as %s: %r", line.kind.value, raw)
        parts.append(render_line(line, config.jira.host))

    parts.append("</ul>")
    parts.append(render_signature(config))
    return "".join(parts)


def report_date_label(days: int = 0, force_date: str | None = None, today: date | None = None) -> str:
    """Date used in the subject: ``force_date`` verbatim, else today shifted by ``days``."""
    if force_date:
        return force_date
    today = today or date.today()
    return (today + timedelta(days=days)).strftime(DATE_FORMAT)

"""Pipeline that turns tracker issues and the edited draft into a sent report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .config import ReportConfig
from .draft.draft_file import read_draft, refresh_draft
from .draft.editor import DraftEditor
from .mail.email_sender import ReportSender
from .report.formatter import generate_report, report_date_label
from .report.preview import ReportPreviewer
from .tracker.issue_fetcher import IssueFetcher, JiraIssueFetcher

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RunOptions:
    """Per-invocation switches from the command line."""

    days: int = 0
    to_me: bool = False
    force_date: str | None = None
    dry_run: bool = False


class Editor(Protocol):
    def edit(self, path: Path) -> None:
        ...


class Sender(Protocol):
    def send(self, report: str, recipient: str) -> None:
        ...


class Previewer(Protocol):
    def preview(self, report: str) -> object:
        ...


class DailyReportPipeline:
    """Fetch, edit, format, then mail or preview. Any failure aborts the run."""

    def __init__(
        self,
        config: ReportConfig,
        fetcher: IssueFetcher | None = None,
        editor: Editor | None = None,
        sender: Sender | None = None,
        previewer: Previewer | None = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher or JiraIssueFetcher(config.jira)
        self.editor = editor or DraftEditor(config.editor)
        self.sender = sender or ReportSender(config)
        self.previewer = previewer or ReportPreviewer(config.viewer)

    def recipient(self, options: RunOptions) -> str:
        return self.config.my_email if options.to_me else self.config.work_email

    def run(self, options: RunOptions) -> str:
        recipient = self.recipient(options)
        date_label = report_date_label(options.days, options.force_date)

        issues = self.fetcher.fetch()
        refresh_draft(self.config.input_file, issues)

        self.editor.edit(self.config.input_file)
        text = read_draft(self.config.input_file)

        report = generate_report(self.config, text, recipient, date_label)
        LOGGER.info("Report for %s generated (%s chars).", date_label, len(report))

        if options.dry_run:
            self.previewer.preview(report)
        else:
            self.sender.send(report, recipient)
        return report

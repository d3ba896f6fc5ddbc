"""
Fetch open issues from the tracker's HTML issue navigator.

Issue keys and titles are scraped with a regular expression over the
``issues/?filter=<id>`` page. Callers depend only on ``IssueFetcher`` so
a structured API client can replace the scraper later.
"""

from __future__ import annotations

import logging
import re
from typing import List, Pattern, Protocol

import requests

from ..config import JiraSection
from .cleaning import clean_link_text
from .cookies import CookieSource, cookie_header, load_tracker_cookies
from .models import IssueRef

LOGGER = logging.getLogger(__name__)

ISSUE_LINK_PATTERN: Pattern[str] = re.compile(
    r'<a class="issue-link" data-issue-key=[^>]+>([^<]+)</a>'
)


class IssueFetcher(Protocol):
    def fetch(self) -> List[IssueRef]:
        ...


def parse_issue_links(body: str) -> List[IssueRef]:
    """
    Pair consecutive issue links into (key, title) references.

    The navigator renders two links per row: the key, then the summary.
    """
    texts = [clean_link_text(match) for match in ISSUE_LINK_PATTERN.findall(body)]
    if len(texts) % 2:
        LOGGER.debug("Dropping unpaired trailing issue link %r", texts[-1])
        texts = texts[:-1]
    return [IssueRef(key=texts[i], title=texts[i + 1]) for i in range(0, len(texts), 2)]


class JiraIssueFetcher:
    """Scrapes the tracker filter page using browser session cookies."""

    def __init__(
        self,
        config: JiraSection,
        session: requests.Session | None = None,
        cookie_source: CookieSource | None = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.cookie_source = cookie_source

    @property
    def url(self) -> str:
        return f"{self.config.host}issues/?filter={self.config.filter_id}"

    def fetch(self) -> List[IssueRef]:
        cookies = load_tracker_cookies(self.config.domain, source=self.cookie_source)
        headers = {"Cookie": cookie_header(cookies)} if cookies else {}

        LOGGER.info("Fetching tracker issues from %s", self.url)
        response = self.session.get(self.url, headers=headers, timeout=self.config.timeout)
        if not response.ok:
            LOGGER.warning(
                "Tracker answered %s %s; parsing the page anyway.", response.status_code, response.reason
            )

        issues = parse_issue_links(response.text)
        LOGGER.info("Fetched %s tracker issues.", len(issues))
        return issues

"""Tracker scraping: open issues for the draft file."""

from .issue_fetcher import IssueFetcher, JiraIssueFetcher
from .models import IssueRef

__all__ = ["IssueFetcher", "IssueRef", "JiraIssueFetcher"]

"""Dataclasses for scraped tracker issues."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class IssueRef:
    """Issue key and title as listed by the tracker."""

    key: str
    title: str

    def to_line(self) -> str:
        """Render as ``"<key> <title>"``, the form used in the draft file."""
        return f"{self.key} {self.title}"

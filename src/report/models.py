"""Dataclasses for classified draft lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """Draft line categories, listed in matching order."""

    TASK = "task"
    OTHER = "other"
    COMMENT = "comment"
    DEFAULT = "default"


@dataclass(slots=True, frozen=True)
class ReportLine:
    """A draft line after classification. ``text`` has the matched prefix handled."""

    kind: LineKind
    text: str
    key: str = ""

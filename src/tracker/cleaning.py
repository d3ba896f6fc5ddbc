"""Text-cleaning helpers for scraped issue link text."""

from __future__ import annotations

import re
from typing import Final

WHITESPACE_PATTERN: Final = re.compile(r"\s+", re.MULTILINE)


def normalize_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def clean_link_text(text: str) -> str:
    """Collapse whitespace so the text fits on one draft line. Entities stay escaped."""
    if not text:
        return ""
    return normalize_whitespace(text)

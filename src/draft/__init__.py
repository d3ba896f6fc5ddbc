"""Draft file handling and interactive editing."""

from .draft_file import COMMENT_PREFIX, read_draft, refresh_draft
from .editor import DraftEditor

__all__ = ["COMMENT_PREFIX", "DraftEditor", "read_draft", "refresh_draft"]

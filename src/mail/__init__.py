"""Mail delivery of the report."""

from .credentials import CredentialError, prompt_password
from .email_sender import ReportSender

__all__ = ["CredentialError", "ReportSender", "prompt_password"]

"""SMTP-over-TLS delivery of the rendered report."""

from __future__ import annotations

import logging
import smtplib
import ssl
from typing import Callable

from ..config import ReportConfig
from .credentials import prompt_password

LOGGER = logging.getLogger(__name__)


def build_tls_context(verify: bool) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if not verify:
        LOGGER.warning("SMTP certificate verification is disabled (smtp-verify-cert = false).")
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


class ReportSender:
    """Sends a pre-rendered message (headers included) to a single recipient."""

    def __init__(
        self,
        config: ReportConfig,
        password_prompt: Callable[[], str] = prompt_password,
        smtp_factory: Callable[..., smtplib.SMTP_SSL] = smtplib.SMTP_SSL,
    ) -> None:
        self.config = config
        self.password_prompt = password_prompt
        self.smtp_factory = smtp_factory

    def send(self, report: str, recipient: str) -> None:
        password = self.password_prompt()

        context = build_tls_context(self.config.smtp_verify_cert)
        LOGGER.info("Connecting to %s:%s", self.config.smtp_host, self.config.smtp_port)
        with self.smtp_factory(self.config.smtp_host, self.config.smtp_port, context=context) as server:
            server.login(self.config.my_email, password)
            server.sendmail(self.config.my_email, [recipient], report.encode("utf-8"))
        LOGGER.info("Report sent to %s.", recipient)

"""Configuration loading for the daily report tool."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.toml"
CONFIG_PATH_ENV = "DAILY_REPORT_CONFIG"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or validated."""


def _default_editor() -> str:
    value = os.getenv("EDITOR")
    if value is None or not value.strip():
        return "vim"
    return value.strip()


class ReportSection(BaseModel):
    """Text templates used when rendering the report."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author_name: str = Field(alias="author-name", min_length=1)
    subject_prefix: str = Field(alias="subject-prefix")
    task_prefix: str = Field(alias="task-prefix", min_length=1)
    closing: str = Field(default="С уважением,")


class JiraSection(BaseModel):
    """Issue tracker endpoint settings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    host: str = Field(min_length=1)
    filter_id: str = Field(default="40605", alias="filter-id")
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("host")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.endswith("/") else value + "/"

    @field_validator("filter_id", mode="before")
    @classmethod
    def _filter_as_str(cls, value: object) -> str:
        return str(value).strip()

    @property
    def domain(self) -> str:
        """Host component used to select browser cookies."""
        return self.host.rstrip("/").rsplit("/", 1)[-1]


class ReportConfig(BaseModel):
    """Immutable settings for one run, loaded from a TOML file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    input_file: Path = Field(alias="input-file")
    my_email: str = Field(alias="my-email", min_length=3)
    work_email: str = Field(alias="work-email", min_length=3)
    smtp_host: str = Field(alias="smtp-host", min_length=1)
    smtp_port: int = Field(default=465, alias="smtp-port", ge=1, le=65535)
    smtp_verify_cert: bool = Field(default=True, alias="smtp-verify-cert")
    editor: str = Field(default_factory=_default_editor)
    viewer: str = Field(default="xdg-open")
    report: ReportSection
    jira: JiraSection

    @field_validator("input_file", mode="before")
    @classmethod
    def _expand_user(cls, value: object) -> Path:
        return Path(str(value)).expanduser()


def resolve_config_path(explicit: str | None = None) -> Path:
    """Pick the config path: explicit argument, then environment, then the default."""
    if explicit:
        return Path(explicit)
    env_value = os.getenv(CONFIG_PATH_ENV)
    if env_value and env_value.strip():
        return Path(env_value.strip())
    return Path(DEFAULT_CONFIG_PATH)


def load_config(path: Path) -> ReportConfig:
    """Read and validate the TOML configuration at ``path``."""
    try:
        with path.open("rb") as fh:
            payload = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed TOML in {path}: {exc}") from exc

    # Older config files spell the tracker table in upper case.
    if "jira" not in payload and "JIRA" in payload:
        payload["jira"] = payload.pop("JIRA")
    if "report" not in payload and "Report" in payload:
        payload["report"] = payload.pop("Report")

    try:
        config = ReportConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc

    LOGGER.debug("Loaded config from %s (tracker=%s)", path, config.jira.host)
    return config

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.config import ReportConfig


def build_payload(input_file: Path, **overrides) -> dict:
    payload = {
        "input-file": str(input_file),
        "my-email": "me@example.com",
        "work-email": "team@example.com",
        "smtp-host": "smtp.example.com",
        "report": {
            "author-name": "Ivan Petrov",
            "subject-prefix": "Daily report ",
            "task-prefix": "PROJ-",
        },
        "jira": {"host": "https://tracker.example.com/"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def draft_path(tmp_path):
    return tmp_path / "report.txt"


@pytest.fixture
def config_payload(draft_path):
    return build_payload(draft_path)


@pytest.fixture
def report_config(config_payload):
    return ReportConfig.model_validate(config_payload)

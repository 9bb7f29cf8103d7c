"""
Pytest configuration and fixtures.
"""

import json
from unittest.mock import MagicMock

import pytest

from title_labeler.config import Settings
from title_labeler.gh_toolkit import GitHubLabelClient

ENV_VARS = [
    "INPUT_GITHUB-TOKEN",
    "INPUT_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_PATH",
    "GITHUB_OUTPUT",
    "GITHUB_STEP_SUMMARY",
    "TITLE_LABELER_DEFAULT_LABEL",
    "TITLE_LABELER_DRY_RUN",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the runner's own GitHub Actions variables out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_client():
    """Mock GitHub label client: item and repository start without labels."""
    client = MagicMock(spec=GitHubLabelClient)
    client.full_name = "octo/repo"
    client.list_labels_on_item.return_value = set()
    client.list_labels_on_repo.return_value = set()
    return client


@pytest.fixture
def issue_payload():
    """Minimal `issues: opened` event payload."""
    return {
        "action": "opened",
        "issue": {"number": 7, "title": "[Bug] crash on start"},
        "repository": {"full_name": "octo/repo"},
    }


@pytest.fixture
def pr_payload():
    """Minimal `pull_request: opened` event payload."""
    return {
        "action": "opened",
        "pull_request": {"number": 12, "title": "[feat] add dark mode"},
        "repository": {"full_name": "octo/repo"},
    }


@pytest.fixture
def write_event(tmp_path):
    """Write a payload to a temporary event file and return its path."""
    def _write(payload):
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def settings_for(tmp_path, write_event):
    """Build Settings pointing at a temporary event file and output sinks."""
    def _settings(payload, **kwargs):
        values = {
            "token": "ghp_test",
            "repository": "octo/repo",
            "event_path": write_event(payload),
            "output_path": str(tmp_path / "output.txt"),
            "summary_path": str(tmp_path / "summary.md"),
        }
        values.update(kwargs)
        return Settings(**values)
    return _settings

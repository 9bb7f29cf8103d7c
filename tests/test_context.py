"""
Tests for reading the event payload.
"""

import pytest

from title_labeler.context import ItemKind, load_event, resolve_item, resolve_repository
from title_labeler.errors import ConfigError, ContextError


class TestLoadEvent:
    """Tests for load_event."""

    def test_loads_payload(self, write_event, issue_payload):
        assert load_event(write_event(issue_payload)) == issue_payload

    def test_missing_path(self):
        with pytest.raises(ContextError, match="GITHUB_EVENT_PATH"):
            load_event(None)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContextError, match="not found"):
            load_event(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ContextError, match="not valid JSON"):
            load_event(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ContextError, match="not a JSON object"):
            load_event(str(path))


class TestResolveItem:
    """Tests for resolve_item."""

    def test_issue(self, issue_payload):
        item = resolve_item(issue_payload)
        assert item.kind is ItemKind.ISSUE
        assert item.number == 7
        assert item.title == "[Bug] crash on start"

    def test_pull_request(self, pr_payload):
        item = resolve_item(pr_payload)
        assert item.kind is ItemKind.PULL_REQUEST
        assert item.number == 12

    def test_pull_request_wins_over_issue(self, issue_payload, pr_payload):
        payload = {**issue_payload, **pr_payload}
        assert resolve_item(payload).kind is ItemKind.PULL_REQUEST

    def test_neither(self):
        with pytest.raises(ContextError, match="issue or pull request"):
            resolve_item({"action": "created"})

    @pytest.mark.parametrize("number", [None, 0, -3, "7", True])
    def test_bad_number(self, number):
        with pytest.raises(ContextError, match="issue number"):
            resolve_item({"issue": {"number": number, "title": "[Bug] x"}})

    @pytest.mark.parametrize("title", [None, ""])
    def test_missing_title(self, title):
        with pytest.raises(ContextError, match="pull request title"):
            resolve_item({"pull_request": {"number": 3, "title": title}})

    @pytest.mark.parametrize("payload,kind", [
        ({"issue": "octo/repo#7"}, "issue"),
        ({"pull_request": [12]}, "pull request"),
    ])
    def test_item_not_an_object(self, payload, kind):
        with pytest.raises(ContextError, match=f"The {kind} in the event payload is not an object"):
            resolve_item(payload)

    def test_non_string_title_is_kept(self):
        """A non-string title is not a context error; classification skips it."""
        item = resolve_item({"issue": {"number": 3, "title": 123}})
        assert item.title == 123

    def test_error_step(self):
        with pytest.raises(ContextError) as exc_info:
            resolve_item({})
        assert exc_info.value.step == "context"
        assert str(exc_info.value).startswith("context failed:")


class TestResolveRepository:
    """Tests for resolve_repository."""

    def test_env_value_wins(self, issue_payload):
        assert resolve_repository("acme/widgets", issue_payload) == ("acme", "widgets")

    def test_falls_back_to_payload(self, issue_payload):
        assert resolve_repository(None, issue_payload) == ("octo", "repo")

    def test_missing_everywhere(self):
        with pytest.raises(ContextError, match="repository"):
            resolve_repository(None, {})

    def test_malformed(self):
        with pytest.raises(ConfigError):
            resolve_repository("not-a-repo", {})

"""Read the CI event payload that triggered this run.

GitHub Actions writes the webhook payload of the triggering event to the
file named by ``GITHUB_EVENT_PATH``. An ``issues`` event carries an
``issue`` object, a ``pull_request`` / ``pull_request_target`` event a
``pull_request`` object; both have a ``number`` and a ``title``.
"""
import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from .config import parse_repository
from .errors import ContextError


class ItemKind(str, Enum):
    ISSUE = "issue"
    PULL_REQUEST = "pull_request"

    @property
    def display(self) -> str:
        return "pull request" if self is ItemKind.PULL_REQUEST else "issue"


@dataclass(frozen=True)
class ItemRef:
    kind: ItemKind
    number: int
    title: Any  # usually str; anything else classifies as unclassified


def load_event(event_path: str | None) -> Dict[str, Any]:
    """Load the event payload JSON."""
    if not event_path:
        raise ContextError("GITHUB_EVENT_PATH is not set, no event payload to read")
    path = Path(event_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ContextError(f"event payload {path} not found")
    except json.JSONDecodeError as e:
        raise ContextError(f"event payload {path} is not valid JSON: {e}")
    if not isinstance(payload, dict):
        raise ContextError(f"event payload {path} is not a JSON object")
    return payload


def resolve_item(payload: Dict[str, Any]) -> ItemRef:
    """Pick the pull request or issue out of a payload.

    Pull requests win when both are present (``issue_comment`` events on a
    PR carry an ``issue`` with a ``pull_request`` link, but never the reverse).
    """
    if payload.get("pull_request"):
        kind = ItemKind.PULL_REQUEST
    elif payload.get("issue"):
        kind = ItemKind.ISSUE
    else:
        raise ContextError("Could not get issue or pull request from context.")

    item = payload[kind.value]
    if not isinstance(item, dict):
        raise ContextError(f"The {kind.display} in the event payload is not an object")
    number = item.get("number")
    title = item.get("title")

    if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
        raise ContextError(f"Could not get {kind.display} number from context")
    if title is None or title == "":
        raise ContextError(f"Could not get {kind.display} title from context")
    return ItemRef(kind=kind, number=number, title=title)


def resolve_repository(repository: str | None, payload: Dict[str, Any]) -> tuple[str, str]:
    """Owner and name of the target repository.

    ``GITHUB_REPOSITORY`` takes precedence; the payload's
    ``repository.full_name`` is the fallback for local runs.
    """
    if repository:
        return parse_repository(repository)
    full_name = (payload.get("repository") or {}).get("full_name")
    if not full_name:
        raise ContextError("Could not get repository from GITHUB_REPOSITORY or the event payload")
    return parse_repository(full_name)

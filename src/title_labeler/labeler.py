import logging
from enum import Enum
from typing import Callable, TypeVar

import requests
from github import GithubException

from .categorizer import random_color
from .errors import LabelApplyError

T = TypeVar("T")

# PyGithub raises GithubException for API errors and leaves transport errors as requests exceptions
API_ERRORS = (GithubException, requests.exceptions.RequestException)

_log = logging.getLogger("title_labeler")


class ApplyResult(str, Enum):
    ALREADY_PRESENT = "already_present"
    ADDED = "added"
    CREATED_AND_ADDED = "created_and_added"


def _call(operation: str, fn: Callable[..., T], *args, **kwargs) -> T:
    """Run one GitHub call, turning API failures into LabelApplyError."""
    try:
        return fn(*args, **kwargs)
    except API_ERRORS as e:
        raise LabelApplyError(operation, e) from e


def _already_exists(err: GithubException) -> bool:
    # 422 with code "already_exists" when another run created it first
    if err.status != 422:
        return False
    data = err.data if isinstance(err.data, dict) else {}
    return any(isinstance(e, dict) and e.get("code") == "already_exists" for e in data.get("errors") or [])


def ensure_label(client, item_number: int, label_name: str, logger: logging.Logger | None = None) -> ApplyResult:
    """Make sure ``label_name`` exists in the repository and is on the item.

    Calls run strictly in order: item labels, repository labels, create
    (only when missing), add. Returns early when the item already carries
    the label. Any API failure is raised as :class:`LabelApplyError`; there
    is no retry.
    """
    log = logger or _log

    on_item = _call("list labels on item", client.list_labels_on_item, item_number)
    if label_name in on_item:
        log.info("Label %r already on #%s, skip", label_name, item_number)
        return ApplyResult.ALREADY_PRESENT

    result = ApplyResult.ADDED
    on_repo = _call("list labels on repo", client.list_labels_on_repo)
    if label_name not in on_repo:
        color = random_color()
        log.info("Creating label %r (%s) in %s", label_name, color, client.full_name)
        try:
            client.create_label(label_name, color)
            result = ApplyResult.CREATED_AND_ADDED
        except API_ERRORS as e:
            if not (isinstance(e, GithubException) and _already_exists(e)):
                raise LabelApplyError("create label", e) from e
            log.warning("Label %r was created concurrently, continuing: %s", label_name, e)

    _call("add label to item", client.add_labels_to_item, item_number, [label_name])
    log.info("Added label %r to #%s", label_name, item_number)
    return result

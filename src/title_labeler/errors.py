"""Errors raised by a labeler run, each tagged with the step that failed."""


class LabelerError(Exception):
    step = "labeler"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.step} failed: {self.message}"


class ConfigError(LabelerError):
    """Missing token or invalid settings; raised before any API call."""

    step = "config"


class ContextError(LabelerError):
    """The event payload has no usable issue or pull request."""

    step = "context"


class LabelApplyError(LabelerError):
    """A GitHub API call failed while applying a label."""

    step = "apply"

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        self.status = getattr(cause, "status", None)
        super().__init__(f"{operation}: {cause}")

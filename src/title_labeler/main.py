#Entry point for the GitHub Action: label one issue or pull request by its title prefix.
import logging
import sys

from .config import Settings, load_settings, require_token
from .context import load_event, resolve_repository
from .errors import LabelerError
from .gh_toolkit import make_github_client
from .graph import LabelerState, run_labeler
from .render import render_failure, render_outputs, render_summary, write_outputs, write_summary

LOGGER_NAME = "title_labeler"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def _publish(settings: Settings, state: LabelerState) -> None:
    if settings.output_path:
        write_outputs(settings.output_path, render_outputs(state))
    if settings.summary_path:
        write_summary(settings.summary_path, render_summary(state))


def run(settings: Settings | None = None, logger: logging.Logger | None = None, client=None) -> int:
    """Label the item from the current event. Returns the process exit code.

    ``client`` overrides the GitHub client built from the settings (tests
    pass a fake here).
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    try:
        settings = settings or load_settings()
        needs_client = client is None and not settings.dry_run
        token = require_token(settings) if needs_client else None
        payload = load_event(settings.event_path)
        owner, repo = resolve_repository(settings.repository, payload)
        if needs_client:
            client = make_github_client(token, f"{owner}/{repo}", page_size=settings.page_size)

        state = run_labeler(
            client,
            payload,
            default_label=settings.default_label,
            dry_run=settings.dry_run,
            logger=logger,
        )
    except LabelerError as e:
        logger.error("%s", e)
        print(render_failure(str(e)))
        if settings is not None:
            _publish(settings, {"outcome": "failed", "message": str(e)})
        return 1

    logger.info("%s", state.get("message") or "done")
    _publish(settings, state)
    return 0


def main():
    try:
        settings = load_settings()
    except LabelerError as e:
        print(render_failure(str(e)))
        sys.exit(1)
    logger = setup_logging(settings.log_level)
    sys.exit(run(settings, logger))


if __name__ == "__main__":
    main()

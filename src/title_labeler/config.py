import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

from .errors import ConfigError

# Load values from .env (no-op on CI runners, which set real env vars)
load_dotenv(find_dotenv(usecwd=True))

# GitHub Actions exposes `with: github-token:` as INPUT_GITHUB-TOKEN
TOKEN_VARS = ("INPUT_GITHUB-TOKEN", "INPUT_GITHUB_TOKEN", "GITHUB_TOKEN")

# GitHub caps per_page at 100; repositories with more labels are paged through
PAGE_SIZE = 100

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    token: str | None
    repository: str | None = None
    event_path: str | None = None
    output_path: str | None = None
    summary_path: str | None = None
    default_label: str | None = None
    page_size: int = PAGE_SIZE
    dry_run: bool = False
    log_level: str = "INFO"


def _token_from_env() -> str | None:
    for name in TOKEN_VARS:
        value = (os.getenv(name) or "").strip()
        if value:
            return value
    return None


def parse_repository(repository: str) -> tuple[str, str]:
    """Split 'owner/repo' into its parts."""
    owner, sep, name = repository.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ConfigError(f"repository must be 'owner/repo', got {repository!r}")
    return owner, name


def load_settings() -> Settings:
    """Read settings from the environment (and .env).

    The token is not checked here so that dry runs work without one; see
    :func:`require_token`.
    """
    repository = os.getenv("GITHUB_REPOSITORY") or None
    if repository:
        parse_repository(repository)

    return Settings(
        token=_token_from_env(),
        repository=repository,
        event_path=os.getenv("GITHUB_EVENT_PATH") or None,
        output_path=os.getenv("GITHUB_OUTPUT") or None,
        summary_path=os.getenv("GITHUB_STEP_SUMMARY") or None,
        default_label=(os.getenv("TITLE_LABELER_DEFAULT_LABEL") or "").strip() or None,
        dry_run=(os.getenv("TITLE_LABELER_DRY_RUN") or "").strip().lower() in _TRUTHY,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def require_token(settings: Settings) -> str:
    if not settings.token:
        raise ConfigError("No token found, please set the github-token input or GITHUB_TOKEN.")
    return settings.token


def check_env():
    token = _token_from_env()
    print("GITHUB_TOKEN starts with:", (token or "not set")[:4])
    print("GITHUB_REPOSITORY:", os.getenv("GITHUB_REPOSITORY"))
    print("GITHUB_EVENT_PATH:", os.getenv("GITHUB_EVENT_PATH"))
    print("TITLE_LABELER_DEFAULT_LABEL:", os.getenv("TITLE_LABELER_DEFAULT_LABEL") or "not set")
    print("TITLE_LABELER_DRY_RUN:", os.getenv("TITLE_LABELER_DRY_RUN") or "not set")


if __name__ == "__main__":
    check_env()

import random
import re
from dataclasses import dataclass
from enum import Enum

# Labels we apply to issues and pull requests
LABEL_BUG = "Type: Bug"
LABEL_FEATURE = "Type: Feature"
LABEL_HELP = "Type: Help"
LABEL_OTHER = "Type: Other"

# Keyword groups → label, checked in this order (first hit wins).
# Plain substring test on the lower-cased prefix, so "[debug]" hits "bug" and "[show]" hits "how".
KEYWORD_GROUPS = [
    (("bug", "fix", "fixes", "fixed"), LABEL_BUG),
    (("feature", "feat"), LABEL_FEATURE),
    (("question", "help", "support", "how"), LABEL_HELP),
]

# "[prefix] remainder", anchored at the start, greedy up to the last "]" before whitespace
TITLE_PREFIX_RE = re.compile(r"(\[.*\])\s(.*)")

_HEX_DIGITS = "0123456789ABCDEF"


class Outcome(str, Enum):
    UNCLASSIFIED = "unclassified"  # title absent or not a string
    NO_PREFIX = "no_prefix"
    NO_MATCH = "no_match"
    LABELED = "labeled"


@dataclass(frozen=True)
class Classification:
    outcome: Outcome
    label: str | None = None
    prefix: str | None = None

    @property
    def labeled(self) -> bool:
        return self.outcome is Outcome.LABELED


def extract_prefix(title: str) -> str | None:
    """Return the bracketed prefix of a title (brackets included), or None."""
    m = TITLE_PREFIX_RE.match(title)
    if not m:
        return None
    return m.group(1)


def keyword_guess(prefix: str) -> str | None:
    """Guess a label from a title prefix (e.g. '[BUG]' → Type: Bug)."""
    low = prefix.lower()
    for keywords, label in KEYWORD_GROUPS:
        if any(key in low for key in keywords):
            return label
    return None


def classify(title, default_label: str | None = None) -> Classification:
    """Classify an issue or pull request title into a label.

    Issues and pull requests share one policy: every keyword group applies
    to both, and a prefix matching no group is skipped unless a
    ``default_label`` is given.

    Never raises. A missing or non-string title is ``UNCLASSIFIED``.
    """
    if not isinstance(title, str):
        return Classification(Outcome.UNCLASSIFIED)

    prefix = extract_prefix(title)
    if prefix is None:
        return Classification(Outcome.NO_PREFIX)

    prefix = prefix.lower()
    label = keyword_guess(prefix)
    if label is None:
        if default_label:
            return Classification(Outcome.LABELED, label=default_label, prefix=prefix)
        return Classification(Outcome.NO_MATCH, prefix=prefix)
    return Classification(Outcome.LABELED, label=label, prefix=prefix)


def random_color() -> str:
    """Random label colour, '#' followed by six uppercase hex digits."""
    return "#" + "".join(random.choice(_HEX_DIGITS) for _ in range(6))

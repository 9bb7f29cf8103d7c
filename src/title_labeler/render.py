from pathlib import Path
from typing import Dict, List, Mapping

from .context import ItemKind

# Keys written to $GITHUB_OUTPUT, in this order
OUTPUT_KEYS = ["outcome", "label", "result", "message"]


#Turn the final run state into step outputs (key → value).
def render_outputs(state: Mapping) -> Dict[str, str]:
    outputs: Dict[str, str] = {}
    for key in OUTPUT_KEYS:
        value = state.get(key)
        outputs[key] = "" if value is None else str(value)
    return outputs


#Turn the final run state into a Markdown step summary - readability
def render_summary(state: Mapping, title: str = "Title Labeler") -> str:
    lines: List[str] = [f"### {title}", ""]
    if state.get("kind"):
        kind = ItemKind(state["kind"]).display
        lines.append(f"- **Item:** {kind} #{state.get('number')}")
    if state.get("prefix") is not None:
        lines.append(f"- **Prefix:** `{state['prefix']}`")
    if state.get("label"):
        lines.append(f"- **Label:** {state['label']}")
    if state.get("message"):
        lines.append(f"- {state['message']}")
    return "\n".join(lines).strip()


def render_failure(message: str) -> str:
    """Workflow command that shows ``message`` as an error annotation."""
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return f"::error::{escaped}"


def write_outputs(path: str, outputs: Mapping[str, str]) -> None:
    with Path(path).open("a", encoding="utf-8") as f:
        for key, value in outputs.items():
            # one line per value; GITHUB_OUTPUT needs heredoc syntax for multi-line
            f.write(f"{key}={' '.join(value.splitlines())}\n")


def write_summary(path: str, markdown: str) -> None:
    with Path(path).open("a", encoding="utf-8") as f:
        f.write(markdown + "\n")

from __future__ import annotations
import logging
from typing import TypedDict, Any, Dict, Optional

from langgraph.graph import StateGraph, END

from .categorizer import Outcome, classify as classify_title
from .context import ItemKind, resolve_item
from .labeler import ApplyResult, ensure_label

DRY_RUN = "dry_run"


#"state" shared between steps
class LabelerState(TypedDict, total=False):
    payload: Dict[str, Any]
    kind: Optional[str]
    number: Optional[int]
    title: Any
    outcome: Optional[str]
    prefix: Optional[str]
    label: Optional[str]
    result: Optional[str]
    message: str


def initial_state(payload: Dict[str, Any]) -> LabelerState:
    return {
        "payload": payload,
        "kind": None,
        "number": None,
        "title": None,
        "outcome": None,
        "prefix": None,
        "label": None,
        "result": None,
        "message": "",
    }


def _skip_message(state: LabelerState) -> str:
    kind = ItemKind(state["kind"]).display
    outcome = state["outcome"]
    if outcome == Outcome.UNCLASSIFIED.value:
        return f"The {kind} title is not a string, skip"
    if outcome == Outcome.NO_PREFIX.value:
        return f"No {kind} title prefix found, skip"
    return f"No label matches {kind} title prefix {state['prefix']}, skip"


def _route_after_classify(state: LabelerState) -> str:
    return "apply" if state["outcome"] == Outcome.LABELED.value else END


def build_graph(client, default_label: str | None = None, dry_run: bool = False,
                logger: logging.Logger | None = None):
    """Assemble the resolve_context → classify → apply workflow.

    ``client`` is the per-run GitHub client (see ``gh_toolkit``); it is only
    used by the apply step, so a dry run may pass ``None``.
    """
    log = logger or logging.getLogger("title_labeler")

    def resolve_context(state: LabelerState) -> LabelerState:
        """Find the issue or pull request in the event payload."""
        log.info("→ resolve_context")
        item = resolve_item(state.get("payload") or {})
        state["kind"] = item.kind.value
        state["number"] = item.number
        state["title"] = item.title
        log.info("  %s #%s: %r", item.kind.display, item.number, item.title)
        return state

    def classify(state: LabelerState) -> LabelerState:
        """Pick a label from the title prefix."""
        log.info("→ classify")
        result = classify_title(state["title"], default_label=default_label)
        state["outcome"] = result.outcome.value
        state["prefix"] = result.prefix
        state["label"] = result.label
        if result.labeled:
            log.info("  prefix=%s, label=%s", result.prefix, result.label)
        else:
            state["message"] = _skip_message(state)
            log.info("  %s", state["message"])
        return state

    def apply(state: LabelerState) -> LabelerState:
        """Create the label if needed and put it on the item."""
        log.info("→ apply")
        number, label = state["number"], state["label"]
        if dry_run:
            state["result"] = DRY_RUN
            state["message"] = f"Dry run, would apply {label} to #{number}"
            log.info("  %s", state["message"])
            return state

        applied = ensure_label(client, number, label, logger=log)
        state["result"] = applied.value
        if applied is ApplyResult.ALREADY_PRESENT:
            state["message"] = f"Label {label} already on #{number}, skip"
        else:
            state["message"] = f"Applied {label} to #{number}"
        return state

    g = StateGraph(LabelerState)
    g.add_node("resolve_context", resolve_context)
    g.add_node("classify", classify)
    g.add_node("apply", apply)

    g.set_entry_point("resolve_context")
    g.add_edge("resolve_context", "classify")
    g.add_conditional_edges("classify", _route_after_classify, {"apply": "apply", END: END})
    g.add_edge("apply", END)
    return g.compile()


def run_labeler(client, payload: Dict[str, Any], default_label: str | None = None,
                dry_run: bool = False, logger: logging.Logger | None = None) -> LabelerState:
    """Run the workflow once for one event payload and return the final state."""
    agent = build_graph(client, default_label=default_label, dry_run=dry_run, logger=logger)
    return agent.invoke(initial_state(payload))

"""Graph editor - Edit the whole flow as JSON text.

The flow is replaced wholesale: the editor turns the canonical graph into
text, and a submitted text either parses into a complete replacement
graph that the store persists, or is rejected without touching anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fixflow.graph.defaults import START_ID
from fixflow.graph.model import TroubleshootingGraph
from fixflow.graph.serialize import FlowParseError, graph_from_json, graph_to_json
from fixflow.notify import Notification, NotificationStyle
from fixflow.store import GraphStore

logger = logging.getLogger(__name__)


def to_editable_text(graph: TroubleshootingGraph) -> str:
    """Pretty-print a graph for editing.

    Step order follows the graph, field order is fixed, so the same graph
    always produces the same text.
    """
    return graph_to_json(graph, indent=2) + "\n"


def from_editable_text(text: str) -> TroubleshootingGraph:
    """Parse edited text into a graph.

    Raises:
        FlowParseError: If the text is not a well-formed flow.
    """
    return graph_from_json(text)


@dataclass(frozen=True)
class EditResult:
    """Outcome of submitting edited text.

    Attributes:
        saved: True when the replacement flow was persisted.
        invalid: True when the text did not parse as a flow.
        text: The submitted text, kept so a rejected edit can be fixed.
        error: Why the edit was rejected or not saved.
        return_to: Step to show after a successful save.
    """

    saved: bool
    text: str
    invalid: bool = False
    error: str | None = None
    return_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "saved": self.saved,
            "invalid": self.invalid,
            "text": self.text,
            "error": self.error,
            "return_to": self.return_to,
        }


def submit_edit(store: GraphStore, text: str, start_id: str = START_ID) -> EditResult:
    """Parse ``text`` and, if it is a valid flow, save it through ``store``.

    A parse failure discards the submission; the store is left as it was.
    """
    try:
        candidate = from_editable_text(text)
    except FlowParseError as e:
        logger.info("Rejected edited flow: %s", e)
        store.notify(
            Notification(NotificationStyle.FAILURE, "Invalid JSON", "Please check your syntax.")
        )
        return EditResult(saved=False, text=text, invalid=True, error=str(e))

    result = store.save(candidate)
    if not result["success"]:
        return EditResult(saved=False, text=text, error=result["error"])
    return EditResult(saved=True, text=text, return_to=start_id)

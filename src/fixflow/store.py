"""GraphStore - Owns the canonical troubleshooting graph.

Loads the persisted flow (falling back to the built-in one), and
replaces it wholesale on save. The canonical graph is only swapped once
the new flow has been written, so a failed save leaves the previous flow
in charge both in memory and on disk.

Public API
----------
- ``GraphStore.load`` - read the persisted flow or the default
- ``GraphStore.save`` - persist a replacement flow
- ``GraphStore.reset`` - persist the built-in flow again
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from fixflow.graph.defaults import default_graph
from fixflow.graph.model import TroubleshootingGraph
from fixflow.graph.serialize import FlowParseError, graph_from_json, graph_to_json
from fixflow.notify import Notification, NotificationStyle, Notifier, discard
from fixflow.storage import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "troubleshootingData"


class GraphStore:
    """Canonical graph plus its persisted slot.

    Args:
        storage: Backend holding the persisted flow text.
        key: Name of the slot within the backend.
        notify: Receives user-visible outcome notifications.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_STORAGE_KEY,
        notify: Notifier = discard,
    ) -> None:
        self.storage = storage
        self.key = key
        self.notify = notify
        self._graph = TroubleshootingGraph()
        self._loading = True
        self._lock = threading.Lock()

    @property
    def graph(self) -> TroubleshootingGraph:
        """The canonical graph (empty until the first load)."""
        return self._graph

    @property
    def is_loading(self) -> bool:
        """True until ``load`` has completed once."""
        return self._loading

    def load(self) -> TroubleshootingGraph:
        """Load the persisted flow, or the built-in flow.

        A missing slot silently yields the default. Unreadable content
        also yields the default and raises one warning notification.
        Storage read errors are treated like unreadable content.
        """
        try:
            text = self.storage.get_item(self.key)
            if text:
                graph = graph_from_json(text)
                logger.debug("Loaded custom flow with %d steps", len(graph))
            else:
                graph = default_graph()
                logger.debug("No custom flow stored, using default")
        except (FlowParseError, OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to load or parse flow data: %s", e)
            self.notify(
                Notification(
                    NotificationStyle.WARNING,
                    "Could not load custom flow",
                    "Using default flow.",
                )
            )
            graph = default_graph()

        with self._lock:
            self._graph = graph
            self._loading = False
        return graph

    def save(self, candidate: TroubleshootingGraph) -> dict[str, Any]:
        """Persist ``candidate`` and make it the canonical graph.

        Args:
            candidate: The replacement flow.

        Returns:
            Dict with:
            - success: bool
            - step_count: steps in the canonical graph after the call
            - error: error message, or None
        """
        text = graph_to_json(candidate)
        with self._lock:
            try:
                self.storage.set_item(self.key, text)
            except OSError as e:
                logger.error("Failed to write flow data: %s", e)
                self.notify(
                    Notification(NotificationStyle.FAILURE, "Could not save flow", str(e))
                )
                return {"success": False, "step_count": len(self._graph), "error": str(e)}
            self._graph = candidate
            self._loading = False

        self.notify(
            Notification(
                NotificationStyle.SUCCESS,
                "Flow Saved!",
                "Your changes have been saved.",
            )
        )
        return {"success": True, "step_count": len(candidate), "error": None}

    def reset(self) -> dict[str, Any]:
        """Persist the built-in flow in place of any custom one."""
        return self.save(default_graph())

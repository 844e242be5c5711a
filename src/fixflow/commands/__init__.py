"""
fixflow.commands - CLI command implementations
"""

from __future__ import annotations

import argparse
from typing import Any

from fixflow.config import get_config
from fixflow.notify import ConsoleNotifier, Notifier
from fixflow.storage import FileStorage
from fixflow.store import GraphStore


def open_store(
    args: argparse.Namespace, notify: Notifier | None = None
) -> tuple[GraphStore, dict[str, Any]]:
    """Resolve configuration and load the flow for a command.

    Args:
        args: Parsed CLI arguments (``config``, ``storage_dir``, ``quiet``).
        notify: Notification sink; defaults to printing on stderr.

    Returns:
        Tuple of (loaded store, effective config).
    """
    config = get_config(getattr(args, "config", None))
    storage_dir = getattr(args, "storage_dir", None) or config["storage"]["dir"]
    if notify is None:
        notify = ConsoleNotifier(quiet=getattr(args, "quiet", False))
    store = GraphStore(FileStorage(storage_dir), key=config["storage"]["key"], notify=notify)
    store.load()
    return store, config

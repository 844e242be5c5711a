"""
fixflow.commands.check - Report flow references that lead nowhere.

Nothing reported here is an error: a missing step renders as the end of
the flow. The report helps authors spot typos in step IDs.
"""

from __future__ import annotations

import argparse
import json

from fixflow.commands import open_store
from fixflow.engine import find_dangling_references
from fixflow.notify import NotificationStyle, RecordingNotifier


def run(args: argparse.Namespace) -> int:
    """Run the check command.

    Returns 1 only when the stored flow could not be read at all.
    """
    recorder = RecordingNotifier()
    store, config = open_store(args, notify=recorder)
    start_id = config["flow"]["start"]
    graph = store.graph

    unreadable = any(n.style is NotificationStyle.WARNING for n in recorder.notifications)
    dangling = find_dangling_references(graph)
    missing_start = not graph.has_step(start_id)

    if args.json:
        report = {
            "readable": not unreadable,
            "step_count": len(graph),
            "start": start_id,
            "missing_start": missing_start,
            "dangling": [
                {"step": d.source_id, "answer": d.answer_index, "target": d.target_id}
                for d in dangling
            ],
        }
        print(json.dumps(report, indent=2))
        return 1 if unreadable else 0

    if unreadable:
        print("✗ Stored flow is unreadable; the default flow is in use.")
    print(f"{len(graph)} steps")
    if missing_start:
        print(f"⚠ No '{start_id}' step: the flow cannot be started.")
    for ref in dangling:
        print(f"⚠ {ref}")
    if not missing_start and not dangling and not unreadable:
        print("✓ Every answer leads to an existing step or ends the flow.")
    return 1 if unreadable else 0

"""
fixflow.commands.reset_cmd - Restore the built-in flow.
"""

from __future__ import annotations

import argparse

from fixflow.commands import open_store


def run(args: argparse.Namespace) -> int:
    """Run the reset command."""
    store, _ = open_store(args)
    result = store.reset()
    return 0 if result["success"] else 1

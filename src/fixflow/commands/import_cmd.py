"""
fixflow.commands.import_cmd - Replace the flow with JSON from a file or stdin.
"""

from __future__ import annotations

import argparse
import sys

from fixflow.commands import open_store
from fixflow.editor import submit_edit


def run(args: argparse.Namespace) -> int:
    """Run the import command."""
    if str(args.file) == "-":
        text = sys.stdin.read()
    else:
        try:
            text = args.file.read_text(encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1

    store, config = open_store(args)
    result = submit_edit(store, text, start_id=config["flow"]["start"])
    if not result.saved:
        if result.invalid:
            print(f"  {result.error}", file=sys.stderr)
        return 1
    return 0

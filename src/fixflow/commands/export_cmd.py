"""
fixflow.commands.export_cmd - Write the current flow as editable JSON.
"""

from __future__ import annotations

import argparse
import sys

from fixflow.commands import open_store
from fixflow.editor import to_editable_text


def run(args: argparse.Namespace) -> int:
    """Run the export command."""
    store, _ = open_store(args)
    text = to_editable_text(store.graph)

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        if not args.quiet:
            print(f"Exported {len(store.graph)} steps to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text)
    return 0

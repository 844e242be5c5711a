"""
fixflow.commands.show - Render a single step of the flow.
"""

from __future__ import annotations

import argparse
import json

from fixflow.commands import open_store
from fixflow.engine import StepView, ViewKind, current_step, start_view
from fixflow.graph.icons import symbol_for


def format_view(view: StepView) -> list[str]:
    """Format a step view as numbered text lines."""
    if view.kind is ViewKind.LOADING:
        return ["Loading..."]
    if view.kind is not ViewKind.STEP:
        return [f"{symbol_for(view.icon)} {view.title}", f"  {view.description}"]

    lines = [view.title, ""]
    for number, option in enumerate(view.options, start=1):
        suffix = "" if option.continues else "  (copy solution)"
        lines.append(f"  {number}. {option.symbol} {option.label}{suffix}")
    return lines


def run(args: argparse.Namespace) -> int:
    """Run the show command."""
    store, config = open_store(args)
    flow = config["flow"]

    if args.step_id:
        view = current_step(store.graph, args.step_id, solution_prefix=flow["solution_prefix"])
    else:
        view = start_view(
            store.graph, start_id=flow["start"], solution_prefix=flow["solution_prefix"]
        )

    if args.json:
        print(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
    else:
        print("\n".join(format_view(view)))
    return 0

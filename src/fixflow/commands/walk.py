"""
fixflow.commands.walk - Interactive troubleshooting session.

The session owns the stack of frames: choosing an answer that continues
pushes the next step, ``b`` pops back to the previous frame and ``r``
starts over from the root.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from fixflow.commands import open_store
from fixflow.commands.show import format_view
from fixflow.engine import CopySolution, Navigate, StepView, current_step, start_view
from fixflow.store import GraphStore

PROMPT_HELP = "Choose a number, [b]ack, [r]estart or [q]uit"


class WalkSession:
    """Host-side navigation over a loaded flow.

    Frames are step IDs; the root frame is rendered with ``start_view`` so
    a flow without a start step is reported as invalid.
    """

    def __init__(
        self, store: GraphStore, start_id: str = "start", solution_prefix: str = "Solution: "
    ) -> None:
        self.store = store
        self.start_id = start_id
        self.solution_prefix = solution_prefix
        self.frames: list[str] = [start_id]

    def view(self) -> StepView:
        """Render the top frame."""
        graph = self.store.graph
        if len(self.frames) == 1:
            return start_view(
                graph,
                is_loading=self.store.is_loading,
                start_id=self.start_id,
                solution_prefix=self.solution_prefix,
            )
        return current_step(
            graph,
            self.frames[-1],
            is_loading=self.store.is_loading,
            solution_prefix=self.solution_prefix,
        )

    def push(self, step_id: str) -> None:
        self.frames.append(step_id)

    def pop(self) -> bool:
        """Return to the previous frame; False when already at the root."""
        if len(self.frames) == 1:
            return False
        self.frames.pop()
        return True

    def restart(self) -> None:
        self.frames = [self.start_id]

    def choose(self, number: int) -> CopySolution | None:
        """Select the answer shown as ``number`` (1-based).

        Returns the solution to copy for a terminal answer, otherwise
        pushes the next frame and returns None.

        Raises:
            IndexError: If ``number`` is not one of the shown answers.
        """
        options = self.view().options
        if not 1 <= number <= len(options):
            raise IndexError(number)
        action = options[number - 1].action
        if isinstance(action, Navigate):
            self.push(action.step_id)
            return None
        return action


def interact(
    session: WalkSession,
    read: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> int:
    """Drive ``session`` from line input until the user quits."""
    out = out if out is not None else sys.stdout
    show = True
    while True:
        if show:
            print("\n".join(format_view(session.view())), file=out)
        show = True
        try:
            choice = read(f"[{len(session.frames)}] {PROMPT_HELP}: ").strip().lower()
        except EOFError:
            return 0

        if choice in ("q", "quit"):
            return 0
        if choice in ("b", "back"):
            if not session.pop():
                print("Already at the first question.", file=out)
                show = False
            continue
        if choice in ("r", "restart"):
            session.restart()
            continue

        try:
            solution = session.choose(int(choice))
        except (ValueError, IndexError):
            print(f"Unknown choice: {choice!r}", file=out)
            show = False
            continue
        if solution is not None:
            print(f"\n  {solution.text}\n", file=out)
            show = False


def run(args: argparse.Namespace) -> int:
    """Run the walk command."""
    store, config = open_store(args)
    flow = config["flow"]
    session = WalkSession(store, start_id=flow["start"], solution_prefix=flow["solution_prefix"])
    if args.step:
        session.push(args.step)
    return interact(session)

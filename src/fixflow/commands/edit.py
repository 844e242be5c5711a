"""
fixflow.commands.edit - Edit the flow in an external text editor.

The current flow is written to a temporary JSON file and opened in the
configured editor. Text that does not parse is offered back for
correction; the stored flow only changes once a valid edit is saved.
"""

from __future__ import annotations

import argparse
import os
import shlex
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable

from fixflow.commands import open_store
from fixflow.editor import submit_edit, to_editable_text


def editor_command(config: dict[str, Any]) -> list[str]:
    """Resolve the editor: config, then $VISUAL, then $EDITOR, then vi."""
    command = (
        config.get("editor", {}).get("command")
        or os.environ.get("VISUAL")
        or os.environ.get("EDITOR")
        or "vi"
    )
    return shlex.split(command)


def launch_editor(text: str, command: list[str]) -> str:
    """Open ``text`` in an editor and return what the user saved.

    Raises:
        subprocess.CalledProcessError: If the editor exits non-zero.
    """
    fd, name = tempfile.mkstemp(prefix="fixflow-", suffix=".json")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        subprocess.run([*command, str(path)], check=True)
        return path.read_text(encoding="utf-8")
    finally:
        path.unlink(missing_ok=True)


def _confirm(prompt: str) -> bool:
    try:
        answer = input(prompt).strip().lower()
    except EOFError:
        return False
    return answer in ("", "y", "yes")


def run(
    args: argparse.Namespace,
    edit: Callable[[str, list[str]], str] = launch_editor,
    confirm: Callable[[str], bool] = _confirm,
) -> int:
    """Run the edit command."""
    store, config = open_store(args)
    command = editor_command(config)
    original = to_editable_text(store.graph)
    text = original

    while True:
        try:
            text = edit(text, command)
        except (OSError, subprocess.CalledProcessError) as e:
            print(f"Error: could not run editor {command[0]!r}: {e}", file=sys.stderr)
            return 1

        if text == original:
            print("No changes.")
            return 0

        result = submit_edit(store, text, start_id=config["flow"]["start"])
        if result.saved:
            return 0
        if not result.invalid:
            return 1

        print(f"  {result.error}", file=sys.stderr)
        if not confirm("Re-open the editor to fix it? [Y/n] "):
            print("Edit discarded.", file=sys.stderr)
            return 1

"""
fixflow.commands.config_cmd - Inspect and create configuration.

Subcommands:
    path   Show which .fixflow.toml is in effect
    show   Print the effective configuration as TOML
    init   Write a starter .fixflow.toml in the current directory
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import tomlkit

from fixflow.config import CONFIG_FILENAME, DEFAULT_CONFIG, find_config_file, get_config


def _starter_document() -> tomlkit.TOMLDocument:
    doc = tomlkit.document()
    doc.add(tomlkit.comment("fixflow configuration"))

    storage = tomlkit.table()
    storage.add("dir", DEFAULT_CONFIG["storage"]["dir"])
    storage["dir"].comment("Directory holding the saved flow")
    storage.add("key", DEFAULT_CONFIG["storage"]["key"])
    doc.add("storage", storage)

    flow = tomlkit.table()
    flow.add("start", DEFAULT_CONFIG["flow"]["start"])
    flow.add("solution_prefix", DEFAULT_CONFIG["flow"]["solution_prefix"])
    doc.add("flow", flow)

    editor = tomlkit.table()
    editor.add("command", DEFAULT_CONFIG["editor"]["command"])
    editor["command"].comment("Empty uses $VISUAL or $EDITOR")
    doc.add("editor", editor)

    server = tomlkit.table()
    server.add("host", DEFAULT_CONFIG["server"]["host"])
    server.add("port", DEFAULT_CONFIG["server"]["port"])
    doc.add("server", server)
    return doc


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)

    if action == "path":
        path = args.config or find_config_file(Path.cwd())
        print(path if path else f"No {CONFIG_FILENAME} found; using defaults.")
        return 0

    if action == "show":
        print(tomlkit.dumps(get_config(args.config)), end="")
        return 0

    if action == "init":
        target = Path.cwd() / CONFIG_FILENAME
        if target.exists() and not args.force:
            print(f"Error: {target} already exists (use --force to overwrite).", file=sys.stderr)
            return 1
        target.write_text(tomlkit.dumps(_starter_document()), encoding="utf-8")
        print(f"Created {target}")
        return 0

    print("Usage: fixflow config {path,show,init}", file=sys.stderr)
    return 1

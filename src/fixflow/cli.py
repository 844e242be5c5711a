"""
fixflow.cli - Command-line interface.

Main entry point for the fixflow CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fixflow import __version__
from fixflow.commands import (
    check,
    config_cmd,
    edit,
    export_cmd,
    import_cmd,
    reset_cmd,
    serve,
    show,
    walk,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fixflow",
        description="Branching troubleshooting flows in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fixflow walk                  # Answer questions until a solution is found
  fixflow show log-errors       # Print a single step
  fixflow edit                  # Edit the flow as JSON in $EDITOR
  fixflow export -o flow.json   # Save the flow to a file
  fixflow import flow.json      # Replace the flow from a file
  fixflow reset                 # Go back to the built-in flow
  fixflow check                 # Find answers pointing at missing steps

For detailed command help: fixflow <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"fixflow {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        help="Override the directory holding the saved flow",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    walk_parser = subparsers.add_parser(
        "walk",
        help="Walk through the flow interactively",
    )
    walk_parser.add_argument(
        "--step",
        help="Begin at this step instead of the start step",
        metavar="ID",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print one step and its answers",
    )
    show_parser.add_argument(
        "step_id",
        nargs="?",
        help="Step to show (default: the start step)",
    )
    show_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output the step view as JSON",
    )

    subparsers.add_parser(
        "edit",
        help="Edit the flow as JSON in an external editor",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Print the flow as editable JSON",
    )
    export_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write to a file instead of stdout",
        metavar="FILE",
    )

    import_parser = subparsers.add_parser(
        "import",
        help="Replace the flow with JSON from a file",
    )
    import_parser.add_argument(
        "file",
        type=Path,
        help="JSON file to import ('-' reads stdin)",
    )

    subparsers.add_parser(
        "reset",
        help="Restore the built-in flow",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Report answers that lead to missing steps",
    )
    check_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output the report as JSON",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve the flow over a REST API",
    )
    serve_parser.add_argument("--host", help="Interface to bind", metavar="HOST")
    serve_parser.add_argument("--port", type=int, help="Port to listen on", metavar="PORT")

    config_parser = subparsers.add_parser(
        "config",
        help="Inspect or create configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_subparsers.add_parser("path", help="Show the configuration file in use")
    config_subparsers.add_parser("show", help="Print the effective configuration")
    config_init = config_subparsers.add_parser("init", help="Create .fixflow.toml here")
    config_init.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing file",
    )

    subparsers.add_parser(
        "version",
        help="Show version",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install fixflow[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "walk":
            return walk.run(args)
        elif args.command == "show":
            return show.run(args)
        elif args.command == "edit":
            return edit.run(args)
        elif args.command == "export":
            return export_cmd.run(args)
        elif args.command == "import":
            return import_cmd.run(args)
        elif args.command == "reset":
            return reset_cmd.run(args)
        elif args.command == "check":
            return check.run(args)
        elif args.command == "serve":
            return serve.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "version":
            print(f"fixflow {__version__}")
            return 0
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

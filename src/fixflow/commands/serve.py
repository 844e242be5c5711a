"""
fixflow.commands.serve - Run the REST API for browser front-ends.
"""

from __future__ import annotations

import argparse
import sys

from fixflow.commands import open_store
from fixflow.notify import RecordingNotifier


def run(args: argparse.Namespace) -> int:
    """Run the serve command."""
    try:
        from fixflow.server.app import create_app
    except ImportError as e:
        print(f"Error: server dependencies not installed ({e}).", file=sys.stderr)
        print("Install with: pip install fixflow[server]", file=sys.stderr)
        return 1

    notifier = RecordingNotifier()
    store, config = open_store(args, notify=notifier)
    app = create_app(store, config, notifier=notifier)

    host = args.host or config["server"]["host"]
    port = args.port or config["server"]["port"]
    print(f"Serving flow with {len(store.graph)} steps on http://{host}:{port}/", file=sys.stderr)
    app.run(host=host, port=port, debug=False, threaded=False)
    return 0

"""
fixflow - Branching troubleshooting flows

Walks a user through a question/answer graph from a root question to a
resolution, and lets the graph be edited as JSON and persisted between
sessions.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fixflow")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from fixflow.engine import current_step, select_answer, start_view
from fixflow.graph import Answer, Step, TroubleshootingGraph
from fixflow.store import GraphStore

__all__ = [
    "__version__",
    "Answer",
    "Step",
    "TroubleshootingGraph",
    "GraphStore",
    "current_step",
    "select_answer",
    "start_view",
]

"""Graph module - Troubleshooting graph data structures.

Exports:
- Answer: One selectable option on a step
- Step: A single question node
- TroubleshootingGraph: Mapping from step ID to Step
- FlowParseError: Text could not be read as a graph
- default_graph / START_ID / SOLUTION_PREFIX: Built-in flow and conventions
- symbol_for: Icon name to display symbol
"""

from fixflow.graph.defaults import SOLUTION_PREFIX, START_ID, default_graph
from fixflow.graph.icons import DEFAULT_SYMBOL, symbol_for
from fixflow.graph.model import Answer, Step, TroubleshootingGraph
from fixflow.graph.serialize import FlowParseError, graph_from_json, graph_to_json

__all__ = [
    "Answer",
    "Step",
    "TroubleshootingGraph",
    "FlowParseError",
    "default_graph",
    "START_ID",
    "SOLUTION_PREFIX",
    "DEFAULT_SYMBOL",
    "symbol_for",
    "graph_from_json",
    "graph_to_json",
]

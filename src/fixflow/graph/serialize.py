"""Graph Serialization - Convert troubleshooting graphs to and from JSON.

The persisted slot and the editor share one format: a JSON object keyed
by step ID, each value holding ``id``, ``question`` and ``answers``, and
each answer holding ``text``, ``nextId`` and an optional ``icon``.

Only structure is checked here. Dangling ``nextId`` values and a missing
start step are accepted and handled at render time.
"""

from __future__ import annotations

import json
from typing import Any

from fixflow.graph.model import Answer, Step, TroubleshootingGraph


class FlowParseError(ValueError):
    """Text could not be read as a troubleshooting graph.

    Attributes:
        line: 1-based line of a JSON syntax error, if known.
        column: 1-based column of a JSON syntax error, if known.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        base = super().__str__()
        if self.line is not None:
            return f"{base} (line {self.line}, column {self.column})"
        return base


def serialize_answer(answer: Answer) -> dict[str, Any]:
    """Serialize an Answer to a JSON-compatible dict."""
    result: dict[str, Any] = {
        "text": answer.text,
        "nextId": answer.next_id,
    }
    if answer.icon is not None:
        result["icon"] = answer.icon
    return result


def serialize_step(step: Step) -> dict[str, Any]:
    """Serialize a Step to a JSON-compatible dict."""
    return {
        "id": step.id,
        "question": step.question,
        "answers": [serialize_answer(a) for a in step.answers],
    }


def serialize_graph(graph: TroubleshootingGraph) -> dict[str, Any]:
    """Serialize a graph to a JSON-compatible dict, keeping key order."""
    return {step_id: serialize_step(step) for step_id, step in graph.items()}


def _optional_str(value: Any, where: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise FlowParseError(f"{where} must be a string or null")


def _deserialize_answer(data: Any, where: str) -> Answer:
    if not isinstance(data, dict):
        raise FlowParseError(f"{where} must be an object")
    text = data.get("text", "")
    if not isinstance(text, str):
        raise FlowParseError(f"{where}.text must be a string")
    return Answer(
        text=text,
        next_id=_optional_str(data.get("nextId"), f"{where}.nextId"),
        icon=_optional_str(data.get("icon"), f"{where}.icon"),
    )


def _deserialize_step(key: str, data: Any) -> Step:
    where = f"step {key!r}"
    if not isinstance(data, dict):
        raise FlowParseError(f"{where} must be an object")

    step_id = data.get("id", key)
    if not isinstance(step_id, str):
        raise FlowParseError(f"{where}.id must be a string")
    question = data.get("question", "")
    if not isinstance(question, str):
        raise FlowParseError(f"{where}.question must be a string")
    answers = data.get("answers", [])
    if not isinstance(answers, list):
        raise FlowParseError(f"{where}.answers must be a list")

    return Step(
        id=step_id,
        question=question,
        answers=tuple(
            _deserialize_answer(answer, f"{where}.answers[{i}]") for i, answer in enumerate(answers)
        ),
    )


def deserialize_graph(data: Any) -> TroubleshootingGraph:
    """Build a graph from decoded JSON data.

    Raises:
        FlowParseError: If the data does not have the graph structure.
    """
    if not isinstance(data, dict):
        raise FlowParseError("Flow data must be a JSON object keyed by step ID")
    return TroubleshootingGraph((key, _deserialize_step(key, value)) for key, value in data.items())


def graph_to_json(graph: TroubleshootingGraph, indent: int | None = 2) -> str:
    """Encode a graph as JSON text."""
    return json.dumps(serialize_graph(graph), indent=indent, ensure_ascii=False)


def graph_from_json(text: str) -> TroubleshootingGraph:
    """Decode JSON text into a graph.

    Raises:
        FlowParseError: On malformed JSON or a malformed graph structure.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FlowParseError(f"Invalid JSON: {e.msg}", line=e.lineno, column=e.colno) from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and very deep nesting
        raise FlowParseError(f"Invalid JSON: {e}") from e
    return deserialize_graph(data)

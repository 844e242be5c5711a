"""Traversal engine - Step views and answer actions.

Everything here is a pure function of the graph passed in. The engine
keeps no navigation state: the host owns the stack of frames and pushes
a new frame for every ``Navigate`` action, so revisiting a step (a cycle
in the flow) simply renders it again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from fixflow.graph.defaults import SOLUTION_PREFIX, START_ID
from fixflow.graph.icons import resolve_icon, symbol_for
from fixflow.graph.model import Answer, TroubleshootingGraph


class ViewKind(Enum):
    """What a rendered frame shows."""

    LOADING = "loading"
    STEP = "step"
    END_OF_FLOW = "end_of_flow"
    INVALID_FLOW = "invalid_flow"


@dataclass(frozen=True)
class Navigate:
    """Push a new frame rendering ``step_id``."""

    step_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "navigate", "step_id": self.step_id}


@dataclass(frozen=True)
class CopySolution:
    """Expose ``text`` for copying; the flow does not advance."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "copy", "text": self.text}


Action = Union[Navigate, CopySolution]


@dataclass(frozen=True)
class AnswerOption:
    """An answer as presented: label, icon and what selecting it does."""

    label: str
    icon: str
    symbol: str
    action: Action

    @property
    def continues(self) -> bool:
        return isinstance(self.action, Navigate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "icon": self.icon,
            "symbol": self.symbol,
            "action": self.action.to_dict(),
        }


@dataclass(frozen=True)
class StepView:
    """Everything a host needs to render one frame.

    For ``STEP`` views ``title`` is the step's question. The other kinds
    carry a fixed title and description and no options.
    """

    kind: ViewKind
    step_id: str | None = None
    title: str = ""
    description: str = ""
    icon: str | None = None
    options: tuple[AnswerOption, ...] = field(default_factory=tuple)

    @property
    def is_loading(self) -> bool:
        return self.kind is ViewKind.LOADING

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "step_id": self.step_id,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "is_loading": self.is_loading,
            "options": [option.to_dict() for option in self.options],
        }


LOADING_VIEW = StepView(kind=ViewKind.LOADING)


def solution_text(text: str, prefix: str = SOLUTION_PREFIX) -> str:
    """Return the copyable part of a terminal answer.

    The prefix is removed only when the text starts with it; any other
    text is returned verbatim.
    """
    if prefix and text.startswith(prefix):
        return text[len(prefix) :]
    return text


def select_answer(answer: Answer, solution_prefix: str = SOLUTION_PREFIX) -> Action:
    """Decide what selecting ``answer`` does."""
    if answer.next_id:
        return Navigate(answer.next_id)
    return CopySolution(solution_text(answer.text, solution_prefix))


def end_of_flow_view(step_id: str | None = None) -> StepView:
    return StepView(
        kind=ViewKind.END_OF_FLOW,
        step_id=step_id,
        title="End of Flow",
        description="You've reached a final step.",
        icon="CheckCircle",
    )


def current_step(
    graph: TroubleshootingGraph,
    step_id: str,
    *,
    is_loading: bool = False,
    solution_prefix: str = SOLUTION_PREFIX,
) -> StepView:
    """Render the frame for ``step_id``.

    An ID with no step (a terminal answer's target or a dangling
    reference) renders the end-of-flow view instead of failing.
    """
    if is_loading:
        return LOADING_VIEW

    step = graph.find_by_id(step_id)
    if step is None:
        return end_of_flow_view(step_id)

    options = tuple(
        AnswerOption(
            label=answer.text,
            icon=resolve_icon(answer.icon),
            symbol=symbol_for(answer.icon),
            action=select_answer(answer, solution_prefix),
        )
        for answer in step.answers
    )
    return StepView(kind=ViewKind.STEP, step_id=step_id, title=step.question, options=options)


def start_view(
    graph: TroubleshootingGraph,
    *,
    is_loading: bool = False,
    start_id: str = START_ID,
    solution_prefix: str = SOLUTION_PREFIX,
) -> StepView:
    """Render the root frame, flagging a flow that has no start step."""
    if not is_loading and not graph.has_step(start_id):
        return StepView(
            kind=ViewKind.INVALID_FLOW,
            step_id=start_id,
            title="Invalid Flow Data",
            description=f"Could not find a '{start_id}' step. Check your data in the editor.",
            icon="ExclamationMark",
        )
    return current_step(graph, start_id, is_loading=is_loading, solution_prefix=solution_prefix)


@dataclass(frozen=True)
class DanglingReference:
    """An answer pointing at a step that does not exist.

    Not an error: selecting such an answer renders the end-of-flow view.
    """

    source_id: str
    answer_index: int
    target_id: str

    def __str__(self) -> str:
        return f"{self.source_id}[{self.answer_index}] --> {self.target_id} (missing)"


def find_dangling_references(graph: TroubleshootingGraph) -> list[DanglingReference]:
    """List every answer whose next step is missing from the graph."""
    dangling: list[DanglingReference] = []
    for step_id, step in graph.items():
        for index, answer in enumerate(step.answers):
            if answer.next_id and not graph.has_step(answer.next_id):
                dangling.append(DanglingReference(step_id, index, answer.next_id))
    return dangling

"""Step and Answer - Node representation for troubleshooting graphs.

This module provides the core data structures:
- Answer: One selectable option on a step
- Step: A single question node
- TroubleshootingGraph: Mapping from step ID to Step
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Answer:
    """One selectable option on a Step.

    Attributes:
        text: Display label. Terminal answers usually carry a
            "Solution: " prefixed resolution string.
        next_id: ID of the step to continue to, or None when the
            answer ends the flow.
        icon: Optional symbol name, purely cosmetic.
    """

    text: str
    next_id: str | None = None
    icon: str | None = None

    @property
    def is_terminal(self) -> bool:
        """True when selecting this answer does not advance the flow."""
        # An empty string is treated the same as a missing next step
        return not self.next_id


@dataclass(frozen=True)
class Step:
    """A single question node.

    Attributes:
        id: Unique key within the graph, never regenerated.
        question: Display text for the step.
        answers: Answers in display order.
    """

    id: str
    question: str = ""
    answers: tuple[Answer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of answers but always store a tuple
        if not isinstance(self.answers, tuple):
            object.__setattr__(self, "answers", tuple(self.answers))

    def iter_next_ids(self) -> Iterator[str]:
        """Iterate over the step IDs this step can continue to."""
        for answer in self.answers:
            if answer.next_id:
                yield answer.next_id


class TroubleshootingGraph(Mapping[str, Step]):
    """Read-only mapping from step ID to Step.

    Keys keep their insertion order so the editor can reproduce the
    layout the user wrote. A graph is never modified after construction;
    replacing the flow means building a new graph.
    """

    def __init__(self, steps: Mapping[str, Step] | Iterable[tuple[str, Step]] = ()) -> None:
        self._index: dict[str, Step] = dict(steps)

    @classmethod
    def from_steps(cls, steps: Iterable[Step]) -> TroubleshootingGraph:
        """Build a graph keyed by each step's own ID."""
        return cls((step.id, step) for step in steps)

    def __getitem__(self, step_id: str) -> Step:
        return self._index[step_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TroubleshootingGraph):
            return self._index == other._index
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TroubleshootingGraph({list(self._index)!r})"

    def find_by_id(self, step_id: str) -> Step | None:
        """Find a step by ID, or None when the graph has no such step."""
        return self._index.get(step_id)

    def has_step(self, step_id: str) -> bool:
        """Check whether a step exists."""
        return step_id in self._index

    def all_steps(self) -> Iterator[Step]:
        """Iterate over steps in insertion order."""
        yield from self._index.values()

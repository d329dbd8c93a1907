"""
Sequence Solver Data Models.

This module defines all data structures used by the solver:
- Unconstrained / HitGroup / Exact: tail constraint variants
- TailConstraint: union of the three variants
- CumulativeStep: one point of the running-sum trace
- SearchStats: counters of a single BFS run
- SolverResult: final result (found or not found)

NOTE: Resolution of constraints to alphabet values lives in constraints.py,
      the search itself in search.py and solver.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Unconstrained:
    """Any alphabet value is allowed in this tail slot."""


@dataclass(frozen=True)
class HitGroup:
    """Only values of the hit group are allowed in this tail slot."""


@dataclass(frozen=True)
class Exact:
    """
    Exactly one value is allowed in this tail slot.

    Attributes:
        value: Required value. Must be part of the alphabet, otherwise the
               slot resolves to no options at all.
    """
    value: int


TailConstraint = Union[Unconstrained, HitGroup, Exact]


@dataclass(frozen=True)
class CumulativeStep:
    """
    One point of the cumulative-sum trace.

    Attributes:
        step: 0 for the synthetic start point, i for the i-th element
        value: Element placed at this step (0 for the start point)
        sum: Running total after placing the element
    """
    step: int
    value: int
    sum: int

    def to_dict(self) -> dict[str, int]:
        return {"step": self.step, "value": self.value, "sum": self.sum}


@dataclass
class SearchStats:
    """
    Counters collected during one shortest_body() run.

    Attributes:
        sums_visited: Distinct partial sums ever enqueued (incl. start sum 0)
        nodes_expanded: Frontier nodes whose successors were generated
        max_depth_reached: Longest path length dequeued
    """
    sums_visited: int = 0
    nodes_expanded: int = 0
    max_depth_reached: int = 0


@dataclass
class SolverResult:
    """
    Result of a full solve.

    Attributes:
        found: True if a sequence reaching the target exists within bounds
        sequence: body + tail
        body: Elements before the tail (may be empty)
        tail: Last three elements (third-last, second-last, last)
        cumulative_steps: Running-sum trace starting with (0, 0, 0)
        tails_evaluated: Tail combinations checked by the assembler

    Notes:
        - NotFound results carry empty lists and total_length == 0
        - to_dict() produces the JSON shape consumed by the web layer
    """
    found: bool
    sequence: list[int] = field(default_factory=list)
    body: list[int] = field(default_factory=list)
    tail: list[int] = field(default_factory=list)
    cumulative_steps: list[CumulativeStep] = field(default_factory=list)
    tails_evaluated: int = 0

    @property
    def total_length(self) -> int:
        return len(self.sequence)

    @classmethod
    def not_found(cls, tails_evaluated: int = 0) -> SolverResult:
        return cls(found=False, tails_evaluated=tails_evaluated)

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": self.found,
            "sequence": list(self.sequence),
            "body": list(self.body),
            "tail": list(self.tail),
            "totalLength": self.total_length,
            "cumulativeSteps": [s.to_dict() for s in self.cumulative_steps],
        }

    def __repr__(self):
        if not self.found:
            return "SolverResult(found=False)"
        return f"SolverResult(body={self.body}, tail={self.tail}, length={self.total_length})"

"""
Sequence Solver: shortest constrained-tail sequence search.

Main API:
    solve_sequence(target_total, tail_constraints, config) -> SolverResult
    solve(target_total, third_last, second_last, last) -> SolverResult

The tail is the last 3 elements of the sequence. Each tail slot is
constrained by Unconstrained(), HitGroup() or Exact(value). The remaining
body is found by a bounded breadth-first search over partial sums.
"""

from .config import ALPHABET, HIT_GROUP, TAIL_LABELS, TAIL_LENGTH, SearchConfig
from .models import (
    Unconstrained,
    HitGroup,
    Exact,
    TailConstraint,
    CumulativeStep,
    SearchStats,
    SolverResult,
)
from .constraints import resolve_options, parse_constraint, describe_constraint
from .search import shortest_body
from .solver import solve_sequence, solve, cumulative_steps


__all__ = [
    # Main API
    "solve_sequence",
    "solve",
    "shortest_body",
    "resolve_options",
    "parse_constraint",
    "describe_constraint",
    "cumulative_steps",
    # Config
    "ALPHABET",
    "HIT_GROUP",
    "TAIL_LABELS",
    "TAIL_LENGTH",
    "SearchConfig",
    # Models
    "Unconstrained",
    "HitGroup",
    "Exact",
    "TailConstraint",
    "CumulativeStep",
    "SearchStats",
    "SolverResult",
]

"""
Sequence assembler.

Enumerates every tail candidate allowed by the three tail constraints, asks
shortest_body() for the body that completes each one, and keeps the globally
shortest full sequence.

Tail order is (third-last, second-last, last). Enumeration runs third-last
outermost and last innermost; the first candidate reaching the minimum length
wins ties.
"""

from __future__ import annotations
from itertools import product
from typing import Any, Optional, Sequence

import numpy as np

from app.main.sequence_solver.config import ALPHABET, HIT_GROUP, TAIL_LENGTH, SearchConfig
from app.main.sequence_solver.constraints import parse_constraint, resolve_options
from app.main.sequence_solver.models import CumulativeStep, SolverResult, TailConstraint
from app.main.sequence_solver.search import shortest_body


def solve_sequence(target_total: int,
                   tail_constraints: Sequence[TailConstraint],
                   config: Optional[SearchConfig] = None,
                   alphabet: Sequence[int] = ALPHABET,
                   hit_group: Sequence[int] = HIT_GROUP) -> SolverResult:
    """
    Find the shortest sequence summing to target_total with a constrained tail.

    Args:
        target_total: Required sum of the whole sequence
        tail_constraints: Exactly 3 constraints (third-last, second-last, last)
        config: Search bounds (default: SearchConfig())
        alphabet: Sequence values (default: ALPHABET)
        hit_group: Hit group subset (default: HIT_GROUP)

    Returns:
        SolverResult; found=False if no tail candidate admits a body

    Raises:
        ValueError: Not exactly 3 tail constraints

    Example:
        >>> result = solve_sequence(49, [HitGroup(), HitGroup(), HitGroup()])
        >>> sum(result.sequence) == 49
        True
    """
    if len(tail_constraints) != TAIL_LENGTH:
        raise ValueError(
            f"Expected {TAIL_LENGTH} tail constraints, got {len(tail_constraints)}"
        )
    if config is None:
        config = SearchConfig()

    option_sets = [resolve_options(c, alphabet, hit_group) for c in tail_constraints]

    if config.verbose:
        print(f"Solving target {target_total}: tail options "
              f"3rd={option_sets[0]} 2nd={option_sets[1]} last={option_sets[2]}")

    if any(len(options) == 0 for options in option_sets):
        if config.verbose:
            print("A tail position has no valid assignment, skipping search")
        return SolverResult.not_found()

    best_sequence = None
    bodies = {}  # body_target -> shortest body (or None), reused across tails
    tails_evaluated = 0

    for tail in product(*option_sets):
        tails_evaluated += 1
        body_target = target_total - sum(tail)

        if body_target not in bodies:
            bodies[body_target] = shortest_body(body_target, config, alphabet)
        body = bodies[body_target]

        if body is None:
            continue

        if best_sequence is None or len(body) + TAIL_LENGTH < len(best_sequence):
            best_sequence = [*body, *tail]

    if config.verbose:
        print(f"Evaluated {tails_evaluated} tails, {len(bodies)} distinct body targets")

    if best_sequence is None:
        if config.verbose:
            print(f"No solution found for target {target_total}")
        return SolverResult.not_found(tails_evaluated)

    if config.verbose:
        print(f"Best sequence ({len(best_sequence)} elements): {best_sequence}")

    return SolverResult(
        found=True,
        sequence=best_sequence,
        body=best_sequence[:-TAIL_LENGTH],
        tail=best_sequence[-TAIL_LENGTH:],
        cumulative_steps=cumulative_steps(best_sequence),
        tails_evaluated=tails_evaluated,
    )


def cumulative_steps(sequence: Sequence[int]) -> list[CumulativeStep]:
    """Running-sum trace of a sequence, prefixed with the synthetic (0, 0, 0) entry."""
    steps = [CumulativeStep(step=0, value=0, sum=0)]
    sums = np.cumsum(np.asarray(sequence, dtype=np.int64))
    for idx, (value, running) in enumerate(zip(sequence, sums), start=1):
        steps.append(CumulativeStep(step=idx, value=int(value), sum=int(running)))
    return steps


def solve(target_total: int, third_last: Any, second_last: Any, last: Any,
          config: Optional[SearchConfig] = None) -> SolverResult:
    """
    Solve from raw form values ("any", "hit" or an integer per tail slot).

    Raises:
        ValueError: A raw value is not a valid constraint
    """
    constraints = [parse_constraint(raw) for raw in (third_last, second_last, last)]
    return solve_sequence(target_total, constraints, config)

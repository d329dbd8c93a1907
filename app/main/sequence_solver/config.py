"""
Sequence Solver Configuration.

This module defines the fixed alphabet and the search parameters:
- ALPHABET: values usable as sequence elements (process-wide, immutable)
- HIT_GROUP: named subset of the alphabet used as a tail constraint
- SearchConfig: BFS bounds (depth limit + admissible value window)

The alphabet is stored as tuples so there is no mutation path at runtime.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence
import warnings


ALPHABET: tuple[int, ...] = (-3, -6, -9, -15, 2, 7, 13, 16)
HIT_GROUP: tuple[int, ...] = (-3, -6, -9)

# Number of constrained positions at the end of every sequence
TAIL_LENGTH = 3

# Display labels for the tail slots, same order as the tail itself
TAIL_LABELS: tuple[str, ...] = ("3rd", "2nd", "Last")

# Options a request may override, and caps on them
REQUEST_OPTIONS: tuple[str, ...] = ("max_depth", "min_sum", "max_sum")
MAX_REQUEST_DEPTH = 200
MAX_REQUEST_WINDOW = 4001


@dataclass
class SearchConfig:
    """
    Bounds for the shortest-body breadth-first search.

    Attributes:
        max_depth: Paths longer than this are not expanded further
        min_sum: Lower edge of the admissible partial-sum window (inclusive)
        max_sum: Upper edge of the admissible partial-sum window (inclusive)
        verbose: Print progress while solving

    Notes:
        - Depth bound and window are heuristics, not invariants. A target that
          can only be reached by leaving the window is reported as NotFound.
        - The window must contain 0 (the BFS start sum).
        - Use check_window() to see whether the window fits an alphabet.
    """
    max_depth: int = 50
    """Maximum path length that is still expanded. TODO: Tuning"""

    min_sum: int = -300
    """Smallest partial sum kept on the frontier"""

    max_sum: int = 400
    """Largest partial sum kept on the frontier"""

    verbose: bool = False
    """Print per-solve progress to stdout"""

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.min_sum > self.max_sum:
            raise ValueError(
                f"Empty value window: min_sum={self.min_sum} > max_sum={self.max_sum}"
            )
        if not (self.min_sum <= 0 <= self.max_sum):
            raise ValueError(
                f"Value window [{self.min_sum}, {self.max_sum}] must contain 0"
            )

    @property
    def window_size(self) -> int:
        """Number of distinct sums inside the admissible window."""
        return self.max_sum - self.min_sum + 1

    def in_window(self, value: int) -> bool:
        return self.min_sum <= value <= self.max_sum

    def check_window(self, alphabet: Sequence[int] = ALPHABET) -> bool:
        """
        Check that the window can hold at least one step of every alphabet value.

        Args:
            alphabet: Values the search will append

        Returns:
            True if every single-element step from 0 stays inside the window.
            Otherwise a warning is emitted and False is returned.
        """
        outside = [v for v in alphabet if not self.in_window(v)]
        if outside:
            warnings.warn(
                f"Value window [{self.min_sum}, {self.max_sum}] is narrower than "
                f"the alphabet range; values {outside} can never be placed as "
                f"an intermediate step."
            )
            return False
        return True

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> SearchConfig:
        """
        Build a config from a plain dict (e.g. request JSON).

        Only the bounds (max_depth, min_sum, max_sum) can be overridden, and
        they are capped by MAX_REQUEST_DEPTH and MAX_REQUEST_WINDOW.

        Raises:
            ValueError: Unknown key, non-integer bound or bound above the caps
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Search options must be an object, got {data!r}")

        unknown = sorted(set(data) - set(REQUEST_OPTIONS))
        if unknown:
            raise ValueError(f"Unknown search option(s): {', '.join(unknown)}")

        kwargs = {}
        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Search option '{key}' must be an integer, got {value!r}")
            kwargs[key] = value

        config = cls(**kwargs)
        if config.max_depth > MAX_REQUEST_DEPTH:
            raise ValueError(
                f"max_depth={config.max_depth} exceeds the limit of {MAX_REQUEST_DEPTH}"
            )
        if config.window_size > MAX_REQUEST_WINDOW:
            raise ValueError(
                f"Value window [{config.min_sum}, {config.max_sum}] is wider than "
                f"the limit of {MAX_REQUEST_WINDOW} sums"
            )
        return config

"""
Tail constraint parsing and resolution.

resolve_options() turns a constraint into the concrete alphabet values allowed
in one tail slot. parse_constraint() turns raw form/JSON values ("any", "hit",
an integer) into a constraint variant.
"""

from __future__ import annotations
from typing import Any, Sequence
import warnings

from app.main.sequence_solver.config import ALPHABET, HIT_GROUP
from app.main.sequence_solver.models import Exact, HitGroup, TailConstraint, Unconstrained


ANY_TOKEN = "any"
HIT_TOKEN = "hit"


def resolve_options(constraint: TailConstraint,
                    alphabet: Sequence[int] = ALPHABET,
                    hit_group: Sequence[int] = HIT_GROUP) -> tuple[int, ...]:
    """
    Resolve a tail constraint to the alphabet values it allows.

    Args:
        constraint: Unconstrained, HitGroup or Exact(value)
        alphabet: Full alphabet (default: ALPHABET)
        hit_group: Hit group subset (default: HIT_GROUP)

    Returns:
        Tuple of allowed values in alphabet order, without duplicates.
        Exact values outside the alphabet resolve to () and emit a warning.

    Raises:
        TypeError: constraint is not one of the three variants
    """
    if isinstance(constraint, Unconstrained):
        return tuple(dict.fromkeys(alphabet))
    if isinstance(constraint, HitGroup):
        return tuple(dict.fromkeys(hit_group))
    if isinstance(constraint, Exact):
        if constraint.value in alphabet:
            return (constraint.value,)
        warnings.warn(f"Number {constraint.value} is not in the allowed set {tuple(alphabet)}.")
        return ()
    raise TypeError(f"Unknown tail constraint: {constraint!r}")


def parse_constraint(raw: Any) -> TailConstraint:
    """
    Parse a raw constraint value as sent by the configuration form.

    Accepted:
        - "any" -> Unconstrained()
        - "hit" -> HitGroup()
        - int or integer string ("-3", "+7", " 13 ") -> Exact(value)
        - an existing constraint variant (returned unchanged)

    Raises:
        ValueError: Anything else (None, bool, float, free text)
    """
    if isinstance(raw, (Unconstrained, HitGroup, Exact)):
        return raw
    # bool is an int subclass, reject it explicitly
    if isinstance(raw, bool):
        raise ValueError(f"Invalid tail constraint: {raw!r}")
    if isinstance(raw, int):
        return Exact(raw)
    if isinstance(raw, str):
        token = raw.strip().lower()
        if token == ANY_TOKEN:
            return Unconstrained()
        if token == HIT_TOKEN:
            return HitGroup()
        try:
            return Exact(int(token))
        except ValueError:
            pass
    raise ValueError(
        f"Invalid tail constraint: {raw!r} (expected '{ANY_TOKEN}', '{HIT_TOKEN}' or an integer)"
    )


def describe_constraint(constraint: TailConstraint, hit_group: Sequence[int] = HIT_GROUP) -> str:
    """Human readable label, as shown in the configuration form."""
    if isinstance(constraint, Unconstrained):
        return "Any Number"
    if isinstance(constraint, HitGroup):
        return f"Hit Group ({', '.join(str(v) for v in hit_group)})"
    if isinstance(constraint, Exact):
        return f"+{constraint.value}" if constraint.value > 0 else str(constraint.value)
    raise TypeError(f"Unknown tail constraint: {constraint!r}")

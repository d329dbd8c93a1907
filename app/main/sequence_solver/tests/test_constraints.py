"""
Tests for constraint resolution/parsing (constraints.py) and SearchConfig (config.py).

Test Groups:
- R1-R6: resolve_options()
- P1-P4: parse_constraint() / describe_constraint()
- C1-C9: SearchConfig validation, request overrides and their caps
"""

import pytest
from app.main.sequence_solver.config import (
    ALPHABET, HIT_GROUP, MAX_REQUEST_DEPTH, MAX_REQUEST_WINDOW, SearchConfig,
)
from app.main.sequence_solver.constraints import (
    resolve_options, parse_constraint, describe_constraint,
)
from app.main.sequence_solver.models import Unconstrained, HitGroup, Exact


# ========== Test Group R: resolve_options ==========

def test_R1_unconstrained_is_whole_alphabet():
    """R1: Unconstrained -> entire alphabet, alphabet order"""
    assert resolve_options(Unconstrained()) == ALPHABET


def test_R2_hit_group():
    """R2: HitGroup -> hit group subset"""
    assert resolve_options(HitGroup()) == HIT_GROUP
    assert set(HIT_GROUP) <= set(ALPHABET)


@pytest.mark.parametrize("value", ALPHABET)
def test_R3_exact_in_alphabet(value):
    """R3: Exact(v) with v in alphabet -> (v,)"""
    assert resolve_options(Exact(value)) == (value,)


@pytest.mark.parametrize("value", [0, 1, -300, 10_000])
def test_R4_exact_outside_alphabet_warns(value):
    """R4: Exact(v) outside alphabet -> () and a warning, no exception"""
    with pytest.warns(UserWarning, match=str(value)):
        assert resolve_options(Exact(value)) == ()


def test_R5_unknown_constraint_type():
    """R5: Raw strings are not constraints; resolver refuses them"""
    with pytest.raises(TypeError):
        resolve_options("any")


def test_R6_duplicates_removed():
    """R6: Option sets are duplicate-free and order-stable"""
    assert resolve_options(Unconstrained(), alphabet=(2, 7, 2, -3)) == (2, 7, -3)
    assert resolve_options(HitGroup(), hit_group=(-6, -3, -6)) == (-6, -3)


# ========== Test Group P: parse / describe ==========

@pytest.mark.parametrize("raw,expected", [
    ("any", Unconstrained()),
    ("ANY", Unconstrained()),
    ("hit", HitGroup()),
    (" hit ", HitGroup()),
    (7, Exact(7)),
    ("-3", Exact(-3)),
    ("+13", Exact(13)),
    ("0", Exact(0)),
])
def test_P1_parse_valid(raw, expected):
    """P1: Form tokens and integers map to the right variant"""
    assert parse_constraint(raw) == expected


@pytest.mark.parametrize("raw", [None, True, 2.5, "", "maybe", "3.5", [], {}])
def test_P2_parse_invalid(raw):
    """P2: Everything else is a ValueError"""
    with pytest.raises(ValueError):
        parse_constraint(raw)


def test_P3_parse_passthrough():
    """P3: Existing variants are returned unchanged"""
    c = Exact(16)
    assert parse_constraint(c) is c


def test_P4_describe():
    """P4: Labels as shown in the configuration form"""
    assert describe_constraint(Unconstrained()) == "Any Number"
    assert describe_constraint(HitGroup()) == "Hit Group (-3, -6, -9)"
    assert describe_constraint(Exact(7)) == "+7"
    assert describe_constraint(Exact(-15)) == "-15"


# ========== Test Group C: SearchConfig ==========

def test_C1_defaults():
    """C1: Defaults match the documented bounds"""
    config = SearchConfig()
    assert (config.max_depth, config.min_sum, config.max_sum) == (50, -300, 400)
    assert config.window_size == 701
    assert config.in_window(-300) and config.in_window(400)
    assert not config.in_window(401)


@pytest.mark.parametrize("kwargs", [
    {"max_depth": -1},
    {"min_sum": 10, "max_sum": 5},
    {"min_sum": 5, "max_sum": 50},
    {"min_sum": -50, "max_sum": -5},
])
def test_C2_invalid_config(kwargs):
    """C2: Inconsistent bounds are rejected"""
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_C3_from_dict():
    """C3: Overrides from request JSON"""
    assert SearchConfig.from_dict(None) == SearchConfig()
    assert SearchConfig.from_dict({}) == SearchConfig()

    config = SearchConfig.from_dict({"max_depth": 10, "max_sum": 100})
    assert config.max_depth == 10
    assert config.max_sum == 100
    assert config.min_sum == -300


@pytest.mark.parametrize("data", [
    {"depth": 10},
    {"max_depth": "10"},
    {"max_depth": True},
    {"min_sum": 1.5},
])
def test_C4_from_dict_invalid(data):
    """C4: Unknown keys and non-integer bounds are rejected"""
    with pytest.raises(ValueError):
        SearchConfig.from_dict(data)


def test_C5_check_window():
    """C5: Window narrower than the alphabet range warns"""
    assert SearchConfig().check_window() is True

    with pytest.warns(UserWarning, match="narrower"):
        assert SearchConfig(min_sum=-10, max_sum=10).check_window() is False


@pytest.mark.parametrize("data", [
    {"verbose": "false"},
    {"verbose": "0"},
    {"verbose": True},
])
def test_C6_verbose_not_settable_from_dict(data):
    """C6: verbose is a server-side switch, never taken from request options"""
    with pytest.raises(ValueError, match="verbose"):
        SearchConfig.from_dict(data)


@pytest.mark.parametrize("data", [
    {"max_depth": MAX_REQUEST_DEPTH + 1},
    {"min_sum": -200_000, "max_sum": 200_000},
    {"max_sum": MAX_REQUEST_WINDOW},
    {"min_sum": -200_000, "max_sum": 200_000, "max_depth": 100_000},
])
def test_C7_from_dict_caps(data):
    """C7: Request overrides above the depth/window caps are rejected"""
    with pytest.raises(ValueError, match="limit"):
        SearchConfig.from_dict(data)


def test_C8_from_dict_at_caps():
    """C8: Overrides exactly at the caps are accepted"""
    half = (MAX_REQUEST_WINDOW - 1) // 2
    config = SearchConfig.from_dict({
        "max_depth": MAX_REQUEST_DEPTH, "min_sum": -half, "max_sum": half,
    })
    assert config.max_depth == MAX_REQUEST_DEPTH
    assert config.window_size == MAX_REQUEST_WINDOW


def test_C9_from_dict_not_an_object():
    """C9: Search options must be a mapping"""
    with pytest.raises(ValueError):
        SearchConfig.from_dict(["max_depth"])

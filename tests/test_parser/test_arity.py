import pytest

from argloom.exceptions import ArgumentDefinitionError
from argloom.parser import Arity, ArityMode, Fixed, OneOrMore, VariableUpTo


def test_arity_mode():
    mode = ArityMode.FIXED
    assert mode == ArityMode.FIXED
    assert mode != ArityMode.VARIABLE
    assert mode.value == "fixed"
    assert str(mode) == "fixed"
    assert len(ArityMode.choices()) == 3


def test_arity_mode_aliases():
    assert ArityMode("*") == ArityMode.VARIABLE
    assert ArityMode("?") == ArityMode.VARIABLE
    assert ArityMode("+") == ArityMode.ONE_OR_MORE
    assert ArityMode(" Exact ") == ArityMode.FIXED

    with pytest.raises(ValueError):
        ArityMode("many")

    with pytest.raises(ValueError):
        ArityMode(3)


def test_fixed_bounds():
    arity = Fixed(2)
    assert arity.minimum == 2
    assert arity.maximum == 2
    assert not arity.is_full(1)
    assert arity.is_full(2)
    assert not arity.is_satisfied(1)
    assert arity.is_satisfied(2)
    assert not arity.accepts_none
    assert Fixed(0).accepts_none


def test_variable_bounds():
    arity = VariableUpTo(3)
    assert arity.minimum == 0
    assert arity.maximum == 3
    assert arity.accepts_none
    assert arity.is_satisfied(0)
    assert arity.is_full(3)


def test_one_or_more_bounds():
    arity = OneOrMore()
    assert arity.minimum == 1
    assert arity.maximum is None
    assert not arity.is_full(10_000)
    assert not arity.is_satisfied(0)
    assert OneOrMore(3).minimum == 3

    with pytest.raises(ArgumentDefinitionError):
        OneOrMore(0)


def test_arity_count_range():
    with pytest.raises(ArgumentDefinitionError):
        Fixed(-1)

    with pytest.raises(ArgumentDefinitionError):
        VariableUpTo(256)

    with pytest.raises(ArgumentDefinitionError):
        Arity(ArityMode.FIXED, True)


def test_from_nargs():
    assert Arity.from_nargs(2) == Fixed(2)
    assert Arity.from_nargs(0) == Fixed(0)
    assert Arity.from_nargs(-3) == VariableUpTo(3)
    assert Arity.from_nargs(0, at_least_one=True) == OneOrMore(1)
    assert Arity.from_nargs(4, at_least_one=True) == OneOrMore(4)

    with pytest.raises(ArgumentDefinitionError):
        Arity.from_nargs(256)

    with pytest.raises(ArgumentDefinitionError):
        Arity.from_nargs(-256)

    with pytest.raises(ArgumentDefinitionError):
        Arity.from_nargs(-1, at_least_one=True)


def test_arity_str():
    assert str(Fixed(1)) == "Fixed(1)"
    assert str(VariableUpTo(4)) == "VariableUpTo(4)"
    assert str(OneOrMore()) == "OneOrMore(1)"

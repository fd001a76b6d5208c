# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArityMode` and `Arity`, the value-count policy attached to every
argument definition.

An arity decides how many value tokens an argument consumes before the
tokenizer closes it:

- `Fixed(n)`: exactly `n` values. Closes on its own once `n` are captured.
- `VariableUpTo(n)`: anywhere from zero to `n` values. Closes on its own once
  `n` are captured, or when an option name or end of input is reached.
- `OneOrMore(min)`: at least `min` values (one by default), unbounded above.

`ArityMode` supports alias coercion for config-friendly and argparse-like
spellings.

Example:
    ArityMode("fixed")  → ArityMode.FIXED
    ArityMode("*")      → ArityMode.VARIABLE (via alias)
    ArityMode("+")      → ArityMode.ONE_OR_MORE (via alias)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from argloom.exceptions import ArgumentDefinitionError

MAX_VALUE_COUNT = 255


class ArityMode(Enum):
    """
    Defines how the value count of an argument is interpreted.

    Members:
        FIXED: Exactly `count` values.
        VARIABLE: Up to `count` values, possibly none.
        ONE_OR_MORE: At least `count` values, no upper bound.

    Aliases:
        - "exact" → "fixed"
        - "*", "?", "up_to" → "variable"
        - "+", "at_least" → "one_or_more"
    """

    FIXED = "fixed"
    VARIABLE = "variable"
    ONE_OR_MORE = "one_or_more"

    @classmethod
    def choices(cls) -> list[ArityMode]:
        """Return a list of all arity modes."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "exact": "fixed",
            "*": "variable",
            "?": "variable",
            "up_to": "variable",
            "+": "one_or_more",
            "at_least": "one_or_more",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArityMode:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the arity mode."""
        return self.value


@dataclass(frozen=True)
class Arity:
    """
    Value-count policy for one argument.

    Attributes:
        mode (ArityMode): How `count` is interpreted.
        count (int): Exact count, maximum count or minimum count depending on `mode`.
    """

    mode: ArityMode = ArityMode.FIXED
    count: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.count, int) or isinstance(self.count, bool):
            raise ArgumentDefinitionError(
                f"Arity count must be an integer, got {type(self.count).__name__}"
            )
        if self.count < 0 or self.count > MAX_VALUE_COUNT:
            raise ArgumentDefinitionError(
                f"Arity count must be between 0 and {MAX_VALUE_COUNT}, got {self.count}"
            )
        if self.mode == ArityMode.ONE_OR_MORE and self.count < 1:
            raise ArgumentDefinitionError("one_or_more arity needs a minimum of at least 1")

    @property
    def accepts_none(self) -> bool:
        """True if zero values satisfy this arity."""
        return self.minimum == 0

    @property
    def minimum(self) -> int:
        if self.mode == ArityMode.VARIABLE:
            return 0
        return self.count

    @property
    def maximum(self) -> int | None:
        """Upper bound on captured values, or None when unbounded."""
        if self.mode == ArityMode.ONE_OR_MORE:
            return None
        return self.count

    def is_full(self, captured: int) -> bool:
        """True once no further value may be captured."""
        return self.maximum is not None and captured >= self.maximum

    def is_satisfied(self, captured: int) -> bool:
        """True if `captured` values are enough to close the argument."""
        return captured >= self.minimum

    @classmethod
    def from_nargs(cls, count: int, at_least_one: bool = False) -> Arity:
        """
        Build an arity from a packed count.

        `count >= 0` means a fixed count, `count < 0` means up to `-count` values,
        and `at_least_one` means one or more with a minimum of `max(count, 1)`.
        """
        if not isinstance(count, int) or isinstance(count, bool):
            raise ArgumentDefinitionError(f"nargs must be an integer, got {count!r}")
        if count <= -256 or count >= 256:
            raise ArgumentDefinitionError(f"nargs out of range: {count}")
        if at_least_one:
            if count < 0:
                raise ArgumentDefinitionError(
                    "nargs must not be negative when at_least_one is set"
                )
            return OneOrMore(max(count, 1))
        if count >= 0:
            return Fixed(count)
        return VariableUpTo(-count)

    def __str__(self) -> str:
        if self.mode == ArityMode.FIXED:
            return f"Fixed({self.count})"
        elif self.mode == ArityMode.VARIABLE:
            return f"VariableUpTo({self.count})"
        return f"OneOrMore({self.count})"


def Fixed(count: int) -> Arity:
    """Exactly `count` values."""
    return Arity(ArityMode.FIXED, count)


def VariableUpTo(maximum: int) -> Arity:
    """Zero up to `maximum` values."""
    return Arity(ArityMode.VARIABLE, maximum)


def OneOrMore(minimum: int = 1) -> Arity:
    """At least `minimum` values."""
    return Arity(ArityMode.ONE_OR_MORE, minimum)

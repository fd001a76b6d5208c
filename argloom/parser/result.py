# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result structures produced by `ArgumentParser.parse_args`.

A `ParseResult` stores every captured value in one flat, append-only list of
`ParsedValue`s. Each argument that produced output gets an `ArgumentRecord`
holding the offset and count of its window into that list, and labelled
arguments are indexed by label. `ParseResult.get(label)` returns a
`ParsedArgument`, a read-only view over that window.

All positional records are appended before any named record. Appending a
positional record after a named one is a `ResultAssemblyError`.

Example:
    result = parser.parse_args(["alice", "--count", "3"])
    if result.error:
        console.print(result.message)
    result.get("name").value().get()   # "alice"
    result.get("count").values()       # ["3"]
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from argloom.exceptions import ResultAssemblyError, UnknownLabelError


class ParsedValue:
    """
    Holds one parsed value: either absent or a captured text token.

    No type coercion is performed, so the only populated case is `str`.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str | None = None) -> None:
        if value is not None and not isinstance(value, str):
            raise TypeError(f"ParsedValue holds text only, got {type(value).__name__}")
        self._value = value

    def has_value(self) -> bool:
        return self._value is not None

    def __bool__(self) -> bool:
        return self.has_value()

    def get(self) -> str:
        """Return the text value, raising `ValueError` if absent."""
        if self._value is None:
            raise ValueError("ParsedValue is empty")
        return self._value

    def try_get(self) -> str | None:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedValue):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self._value is None:
            return "ParsedValue()"
        return f"ParsedValue({self._value!r})"


@dataclass(frozen=True)
class ArgumentRecord:
    """Window of one argument's values in the flat value list."""

    offset: int
    count: int


class ParsedArgument:
    """
    Read-only view over the values parsed for one argument.

    The view may be empty: a registered optional argument that was not
    supplied yields a valid `ParsedArgument` with no values.
    """

    __slots__ = ("_values", "_offset", "_count")

    def __init__(self, values: Sequence[ParsedValue], offset: int = 0, count: int = 0) -> None:
        self._values = values
        self._offset = offset
        self._count = count

    def value_count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def has_value(self) -> bool:
        return self._count > 0

    def __bool__(self) -> bool:
        return self.has_value()

    def __iter__(self) -> Iterator[ParsedValue]:
        for index in range(self._offset, self._offset + self._count):
            yield self._values[index]

    def __getitem__(self, index: int) -> ParsedValue:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("ParsedArgument index out of range")
        return self._values[self._offset + index]

    def value(self) -> ParsedValue:
        """Return the first value, raising `IndexError` if the view is empty."""
        if not self._count:
            raise IndexError("ParsedArgument has no values")
        return self._values[self._offset]

    def values(self) -> list[str]:
        """Return the captured text of every present value."""
        return [value.get() for value in self if value]

    def __repr__(self) -> str:
        return f"ParsedArgument({self.values()!r})"


class ParseResult:
    """
    Outcome of one `parse_args` call.

    Attributes:
        should_exit (bool): True if the caller should stop after showing `message`.
        error (bool): True if the input tokens were rejected.
        message (str): Help text or error text; empty on a successful parse.
    """

    def __init__(
        self,
        should_exit: bool = False,
        error: bool = False,
        message: str = "",
        labels: Iterable[str] = (),
    ) -> None:
        self._should_exit: bool = should_exit
        self._error: bool = error
        self._message: str = message
        self._values: list[ParsedValue] = []
        self._records: list[ArgumentRecord] = []
        self._label_positions: dict[str, int] = {}
        self._known_labels: set[str] = {label for label in labels if label}
        self._num_positional: int = 0

    @property
    def should_exit(self) -> bool:
        return self._should_exit

    @property
    def error(self) -> bool:
        return self._error

    @property
    def message(self) -> str:
        return self._message

    @property
    def labels(self) -> set[str]:
        """Labels that may be queried with `get()`."""
        return set(self._known_labels)

    @property
    def records(self) -> tuple[ArgumentRecord, ...]:
        return tuple(self._records)

    def __contains__(self, label: object) -> bool:
        return label in self._label_positions

    def get(self, label: str) -> ParsedArgument:
        """
        Return the values parsed for `label`.

        Raises:
            UnknownLabelError: If no argument with this label was registered.
        """
        position = self._label_positions.get(label)
        if position is None:
            if label in self._known_labels:
                return ParsedArgument(self._values)
            raise UnknownLabelError(f"No argument with label '{label}' was registered")
        record = self._records[position]
        return ParsedArgument(self._values, record.offset, record.count)

    def to_dict(self) -> dict[str, list[str]]:
        """Return `{label: [values...]}` for every known label."""
        return {label: self.get(label).values() for label in sorted(self._known_labels)}

    def _append(self, values: Sequence[str], label: str) -> None:
        offset = len(self._values)
        self._values.extend(ParsedValue(value) for value in values)
        position = len(self._records)
        self._records.append(ArgumentRecord(offset=offset, count=len(values)))
        if label:
            if label in self._label_positions:
                raise ResultAssemblyError(f"Label '{label}' was assembled more than once")
            self._label_positions[label] = position
            self._known_labels.add(label)

    def set_positional_argument(self, values: Sequence[str], label: str = "") -> None:
        """Append the values of a positional argument."""
        if self._num_positional != len(self._records):
            raise ResultAssemblyError(
                f"Positional argument '{label}' assembled after a named argument"
            )
        self._append(values, label)
        self._num_positional += 1

    def set_named_argument(self, values: Sequence[str], label: str = "") -> None:
        """Append the values of a named argument."""
        self._append(values, label)

    def __str__(self) -> str:
        return (
            f"ParseResult(should_exit={self._should_exit}, error={self._error}, "
            f"arguments={len(self._records)}, values={len(self._values)})"
        )

    def __repr__(self) -> str:
        return str(self)

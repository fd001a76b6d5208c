# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDefinition` dataclass used by `ArgumentParser` to
represent individual command-line parameters.

Each definition describes one CLI input: how it is identified (by position or
by one or more option names), how many value tokens it consumes, whether it
may be left out, and how it is displayed in usage text.

Definitions are created through `ArgumentParser.add_argument()` and mutated
only through the returned `ArgumentHandle` while the parser is being built.

Key Attributes:
- `label`: Internal name used to look up parsed values
- `names`: Option names (e.g. `-c`, `--count`); empty for positionals
- `metalabel`: Display text used in usage output
- `arity`: `Arity` describing how many values are consumed
"""
from __future__ import annotations

from dataclasses import dataclass, field

from argloom.parser.arity import Arity, Fixed


@dataclass
class ArgumentDefinition:
    """
    Represents a command-line argument definition.

    Attributes:
        label (str): Optional identifier used to retrieve parsed values.
        names (list[str]): Option names; a non-empty list makes the argument named.
        metalabel (str): Display text for usage output, resolved before parsing if empty.
        description (str): Help text for the argument.
        is_optional (bool): True if the argument may be left out.
        is_positional (bool): True if the argument is identified by position.
        arity (Arity): How many value tokens the argument consumes.
        explicit_optional (bool): True if optionality was set by the caller
            rather than derived from the arity.
    """

    label: str = ""
    names: list[str] = field(default_factory=list)
    metalabel: str = ""
    description: str = ""
    is_optional: bool = False
    is_positional: bool = True
    arity: Arity = field(default_factory=lambda: Fixed(1))
    explicit_optional: bool = False

    @property
    def is_named(self) -> bool:
        return not self.is_positional

    def refresh_optional(self) -> None:
        """Derive positional optionality from the arity unless it was set explicitly."""
        if self.is_positional and not self.explicit_optional:
            self.is_optional = self.arity.accepts_none

    def get_usage_text(self) -> str:
        """Get the usage text for the argument: `[metalabel]` or `<metalabel>`."""
        if self.is_optional:
            return f"[{self.metalabel}]"
        return f"<{self.metalabel}>"

    def get_display_name(self) -> str:
        """Name used in messages: metalabel, else label, else the first name."""
        return self.metalabel or self.label or (self.names[0] if self.names else "")

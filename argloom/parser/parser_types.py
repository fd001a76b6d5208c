# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-parse state models for Argloom's argument parser.

Contents:
- `ArgumentLookup`: Lookup structures built from the definitions once per parse.
- `RawCapture`: The argument currently being consumed, with the tokens captured so far.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from argloom.parser.argument import ArgumentDefinition


@dataclass
class ArgumentLookup:
    """Positional order, option-name map and help definition for one parse."""

    positionals: list[ArgumentDefinition] = field(default_factory=list)
    names: dict[str, ArgumentDefinition] = field(default_factory=dict)
    help: ArgumentDefinition | None = None
    required_positionals: int = 0

    def is_help_request(self, tokens: list[str]) -> bool:
        if self.help is None:
            return False
        return any(token in self.help.names for token in tokens)


@dataclass
class RawCapture:
    """Tracks the definition being consumed and the value tokens captured for it."""

    definition: ArgumentDefinition
    name: str
    values: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.values)

    def is_full(self) -> bool:
        return self.definition.arity.is_full(self.count)

    def is_satisfied(self) -> bool:
        return self.definition.arity.is_satisfied(self.count)

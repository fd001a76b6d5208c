# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, a small, strict alternative to
argparse that captures raw text values for positional and named arguments.

Arguments are declared with a builder API and parsed into a flat, queryable
`ParseResult`. No type coercion is performed: every captured value is the
token text as given.

Key Features:
- Declarative argument registration via `add_argument()` and `ArgumentHandle`
- Fixed, up-to-N and one-or-more value counts via `Arity`
- Reserved `-h` / `--help` names with a help short-circuit
- Strict option-name syntax (`-x` or `--long-name`)
- Optional stripping of a leading executable path token
- Rich-powered help rendering

Public Interface:
- `add_argument(...)`: Register a new argument and return its handle.
- `parse_args(...)`: Parse tokens, dropping a leading executable path if present.
- `parse_args_no_execute_filename(...)`: Parse tokens as given.
- `generate_help_text()`: Plain usage text.
- `render_help()`: Rich-styled help output.

Example Usage:
    parser = ArgumentParser("greet")
    parser.add_argument("name", "Who to greet")
    parser.add_argument("count").add_name("-c").add_name("--count").fixed(1)

    result = parser.parse_args(["alice", "--count", "3"], executable_path=None)
    result.get("name").value().get()    # "alice"
    result.get("count").value().get()   # "3"

Setup mistakes raise `ArgumentDefinitionError`. Bad input never raises: it is
returned as a `ParseResult` with `error=True` and a message for the user.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Iterable

from rich.console import Console
from rich.markup import escape

from argloom.console import console as default_console
from argloom.exceptions import ArgumentDefinitionError, ArgumentInputError
from argloom.logger import logger
from argloom.parser.argument import ArgumentDefinition
from argloom.parser.arity import Arity, ArityMode, Fixed, OneOrMore, VariableUpTo
from argloom.parser.parser_types import ArgumentLookup, RawCapture
from argloom.parser.result import ParseResult
from argloom.parser.utils import (
    check_option_name,
    is_option_shaped,
    is_valid_option_name,
    strip_executable_path,
    validate_option_name,
)
from argloom.signals import HelpSignal
from argloom.utils import current_executable_path, get_program_invocation

HELP_NAMES = ("-h", "--help")


class ArgumentHandle:
    """
    Builder handle for one argument definition.

    The handle stores a stable key and looks the definition up on every call,
    so it stays valid however many arguments are added afterwards. All setters
    return the handle for chaining.
    """

    def __init__(self, parser: ArgumentParser, key: int) -> None:
        self._parser = parser
        self._key = key

    @property
    def key(self) -> int:
        return self._key

    @property
    def definition(self) -> ArgumentDefinition:
        return self._parser._get_definition(self._key)

    def set_label(self, label: str) -> ArgumentHandle:
        self._parser._check_label_free(label, self._key)
        self.definition.label = label
        return self

    def set_description(self, description: str) -> ArgumentHandle:
        self.definition.description = description
        return self

    def set_metalabel(self, metalabel: str) -> ArgumentHandle:
        self.definition.metalabel = metalabel
        return self

    def set_optional(self, optional: bool = True) -> ArgumentHandle:
        """Override the optionality otherwise derived from names and arity."""
        definition = self.definition
        definition.is_optional = optional
        definition.explicit_optional = True
        return self

    def set_arity(self, arity: Arity) -> ArgumentHandle:
        if not isinstance(arity, Arity):
            raise ArgumentDefinitionError(f"arity must be an Arity, got {type(arity).__name__}")
        definition = self.definition
        definition.arity = arity
        definition.refresh_optional()
        return self

    def set_nargs(self, count: int, at_least_one: bool = False) -> ArgumentHandle:
        """
        Set the value count from a packed integer.

        Args:
            count (int): `>= 0` for exactly `count` values, `< 0` for up to `-count` values.
            at_least_one (bool): If True, at least `max(count, 1)` values are required.
        """
        return self.set_arity(Arity.from_nargs(count, at_least_one))

    def fixed(self, count: int) -> ArgumentHandle:
        return self.set_arity(Fixed(count))

    def up_to(self, maximum: int) -> ArgumentHandle:
        return self.set_arity(VariableUpTo(maximum))

    def one_or_more(self, minimum: int = 1) -> ArgumentHandle:
        return self.set_arity(OneOrMore(minimum))

    def add_name(self, name: str) -> ArgumentHandle:
        """
        Add a name to the argument.

        A name starting with '-' turns the argument into a named, optional
        argument; every name it already had must then be a valid option name
        too. Once named, every further name must be a valid option name.
        """
        if not isinstance(name, str):
            raise ArgumentDefinitionError(f"Name '{name}' must be a string")
        definition = self.definition
        if is_option_shaped(name):
            validate_option_name(name)
            if definition.is_positional:
                for existing in definition.names:
                    validate_option_name(existing, f" existing name \"{existing}\" isn't valid -")
                definition.is_positional = False
                definition.is_optional = True
        elif definition.is_named:
            validate_option_name(name)
        definition.names.append(name)
        return self

    def __repr__(self) -> str:
        return f"ArgumentHandle(key={self._key}, label={self.definition.label!r})"


class ArgumentParser:
    """
    Argument parser capturing raw text values.

    Definitions are kept in declaration order. Positional arguments are
    matched by position, named arguments by one of their option names.

    Features:
    - Builder-style argument definitions.
    - Fixed, bounded and one-or-more value counts.
    - Required and optional positional arguments.
    - Reserved help names with plain and Rich help output.
    - User-facing error results instead of exceptions for bad input.
    """

    def __init__(
        self,
        program: str | None = None,
        description: str = "",
        console: Console | None = None,
    ) -> None:
        self.program: str = program if program is not None else get_program_invocation()
        self.description: str = description
        self.console: Console = console or default_console
        self._definitions: dict[int, ArgumentDefinition] = {}
        self._next_key: int = 0
        self._add_help()

    def _add_help(self) -> None:
        """Add the reserved help argument to the parser."""
        self.add_argument("help", "Displays the help message").add_name(
            HELP_NAMES[0]
        ).add_name(HELP_NAMES[1]).fixed(0)

    def _get_definition(self, key: int) -> ArgumentDefinition:
        try:
            return self._definitions[key]
        except KeyError:
            raise ArgumentDefinitionError(f"No argument definition with key {key}") from None

    def _check_label_free(self, label: str, key: int | None = None) -> None:
        if not isinstance(label, str):
            raise ArgumentDefinitionError(f"Label '{label}' must be a string")
        if not label:
            return
        for other_key, definition in self._definitions.items():
            if other_key != key and definition.label == label:
                raise ArgumentDefinitionError(f"Label '{label}' is already used by another argument")

    def add_argument(self, label: str = "", description: str = "") -> ArgumentHandle:
        """
        Define a new argument.

        The argument starts out positional with a fixed count of one value.
        Use the returned handle to add option names or change the value count.

        Args:
            label (str): Identifier used with `ParseResult.get()`.
            description (str): Help text for the argument.

        Returns:
            ArgumentHandle: Builder handle for the new definition.
        """
        self._check_label_free(label)
        key = self._next_key
        self._next_key += 1
        definition = ArgumentDefinition(label=label, description=description)
        definition.refresh_optional()
        self._definitions[key] = definition
        return ArgumentHandle(self, key)

    @property
    def arguments(self) -> list[ArgumentDefinition]:
        return list(self._definitions.values())

    def get_argument(self, label: str) -> ArgumentDefinition | None:
        """Return the definition registered under `label`, if any."""
        return next((d for d in self._definitions.values() if d.label == label), None)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a serializable list of dicts.

        Returns:
            List of definitions for config export or documentation.
        """
        defs = []
        for definition in self._definitions.values():
            defs.append(
                {
                    "label": definition.label,
                    "names": list(definition.names),
                    "metalabel": definition.metalabel,
                    "description": definition.description,
                    "optional": definition.is_optional,
                    "positional": definition.is_positional,
                    "arity": str(definition.arity),
                }
            )
        return defs

    def resolve_metalabels(self) -> None:
        """Fill in missing metalabels from names, then label, then position."""
        positional_counter = 0
        for definition in self._definitions.values():
            if not definition.metalabel:
                if definition.names:
                    definition.metalabel = "|".join(definition.names)
                elif definition.label:
                    definition.metalabel = definition.label
                else:
                    definition.metalabel = f"arg{positional_counter}"
            if definition.is_positional:
                positional_counter += 1

    def _fail(self, message: str) -> None:
        logger.error("Invalid argument definitions: %s", message)
        raise ArgumentDefinitionError(message)

    def _build_lookup(self) -> ArgumentLookup:
        """Check definition-level rules and build the per-parse lookup tables."""
        lookup = ArgumentLookup()
        first_optional_positional: ArgumentDefinition | None = None
        labels: set[str] = set()

        for definition in self._definitions.values():
            if definition.label:
                if definition.label in labels:
                    self._fail(f'Multiple arguments with the label "{definition.label}"')
                labels.add(definition.label)

            if definition.is_positional:
                if not definition.is_optional:
                    lookup.required_positionals += 1
                    if first_optional_positional is not None:
                        self._fail(
                            f'Positional argument "{definition.metalabel}" must be optional '
                            "as it follows an optional positional argument "
                            f'"{first_optional_positional.metalabel}"'
                        )
                elif first_optional_positional is None:
                    first_optional_positional = definition
                lookup.positionals.append(definition)
                continue

            if not definition.is_optional:
                self._fail(f'Named argument "{definition.get_display_name()}" must be optional')

            for name in definition.names:
                if name in lookup.names:
                    self._fail(f'Multiple arguments with the name "{name}"')
                lookup.names[name] = definition

            if definition.names[0] in HELP_NAMES:
                if lookup.help is not None:
                    self._fail(
                        f'Multiple help arguments: "{lookup.help.metalabel}" '
                        f'and "{definition.metalabel}"'
                    )
                lookup.help = definition

        return lookup

    def _close_capture(self, capture: RawCapture) -> RawCapture:
        """Check that a capture holds enough values before it is finished."""
        if capture.is_satisfied():
            return capture
        arity = capture.definition.arity
        if arity.mode == ArityMode.FIXED:
            raise ArgumentInputError(
                f'Argument "{capture.name}" expects {arity.count} values '
                f"but only {capture.count} were provided"
            )
        if capture.count == 0 and arity.count == 1:
            raise ArgumentInputError(
                f'Argument "{capture.name}" expects at least one value but none were provided'
            )
        raise ArgumentInputError(
            f'Argument "{capture.name}" expects at least {arity.count} values '
            f"but only {capture.count} were provided"
        )

    def _start_capture(
        self,
        token: str,
        lookup: ArgumentLookup,
        positional_index: int,
        seen: set[int],
    ) -> tuple[RawCapture, bool]:
        """
        Select the definition a token starts.

        Returns the new capture and whether the token itself was consumed
        (option names are, the first value of a positional is not).
        """
        if is_option_shaped(token):
            error = check_option_name(token)
            if error:
                raise ArgumentInputError(error)
            definition = lookup.names.get(token)
            if definition is None:
                raise ArgumentInputError(f'Found unrecognized option "{token}"')
            if id(definition) in seen:
                raise ArgumentInputError(f'Option "{token}" was given more than once')
            seen.add(id(definition))
            return RawCapture(definition, token), True

        if positional_index >= len(lookup.positionals):
            raise ArgumentInputError(
                f'Got too many positional arguments "{token}", '
                f"expected at least {lookup.required_positionals}"
            )
        definition = lookup.positionals[positional_index]
        return RawCapture(definition, definition.metalabel), False

    def _tokenize(self, tokens: list[str], lookup: ArgumentLookup) -> list[RawCapture]:
        if lookup.is_help_request(tokens):
            raise HelpSignal(self.generate_help_text())

        finished: list[RawCapture] = []
        active: RawCapture | None = None
        seen: set[int] = set()
        positional_index = 0
        index = 0

        while index < len(tokens):
            token = tokens[index]

            if active is None:
                active, consumed = self._start_capture(token, lookup, positional_index, seen)
                if active.definition.is_positional:
                    positional_index += 1
                if consumed:
                    index += 1
                    continue

            # Closing never consumes the token; it is reprocessed next iteration.
            if active.is_full():
                finished.append(active)
                active = None
            elif is_valid_option_name(token):
                finished.append(self._close_capture(active))
                active = None
            else:
                active.values.append(token)
                index += 1

        if active is not None:
            finished.append(self._close_capture(active))

        for definition in lookup.positionals[positional_index:]:
            if not definition.is_optional:
                self._close_capture(RawCapture(definition, definition.metalabel))

        return finished

    def _assemble(self, captures: list[RawCapture]) -> ParseResult:
        """Pack finished captures into a result, positional captures first."""
        result = ParseResult(labels=self._labels())
        for capture in captures:
            if capture.definition.is_positional:
                result.set_positional_argument(capture.values, capture.definition.label)
        for capture in captures:
            if capture.definition.is_named:
                result.set_named_argument(capture.values, capture.definition.label)
        return result

    def _labels(self) -> list[str]:
        return [d.label for d in self._definitions.values() if d.label]

    def parse_args(
        self,
        args: Iterable[str] | None = None,
        executable_path: Callable[[], str | Path | None] | None = current_executable_path,
    ) -> ParseResult:
        """
        Parse tokens, dropping a leading executable path first.

        Args:
            args (Iterable[str] | None): Tokens to parse; defaults to `sys.argv`.
            executable_path (Callable | None): Returns the running executable's path.
                Pass None when the first token is never an executable path.

        Returns:
            ParseResult: The parsed values, or a help or error outcome.

        Raises:
            ArgumentDefinitionError: If the argument definitions are malformed.
        """
        tokens = list(sys.argv if args is None else args)
        if executable_path is not None:
            tokens = strip_executable_path(tokens, executable_path)
        return self.parse_args_no_execute_filename(tokens)

    def parse_args_no_execute_filename(self, args: Iterable[str]) -> ParseResult:
        """
        Parse tokens exactly as given.

        Raises:
            ArgumentDefinitionError: If the argument definitions are malformed.
        """
        tokens = list(args)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(f"Tokens must be strings, got {type(token).__name__}")

        self.resolve_metalabels()
        lookup = self._build_lookup()
        logger.debug("[%s] Parsing %d token(s)", self.program, len(tokens))

        try:
            captures = self._tokenize(tokens, lookup)
        except HelpSignal as signal:
            logger.debug("[%s] Help requested", self.program)
            return ParseResult(
                should_exit=True, error=False, message=signal.help_text, labels=self._labels()
            )
        except ArgumentInputError as error:
            logger.debug("[%s] Input rejected: %s", self.program, error)
            return ParseResult(
                should_exit=True, error=True, message=str(error), labels=self._labels()
            )

        result = self._assemble(captures)
        logger.debug("[%s] Parsed %d argument(s)", self.program, len(result.records))
        return result

    def get_usage(self) -> str:
        """Return the usage line: program name followed by every argument."""
        self.resolve_metalabels()
        parts = [self.program] if self.program else []
        parts.extend(d.get_usage_text() for d in self._definitions.values())
        return " ".join(parts)

    def generate_help_text(self) -> str:
        """
        Render plain help text for this parser.

        Returns:
            str: `Usage:` followed by the usage line, then the description if set.
        """
        text = f"Usage:\n\t{self.get_usage()}"
        if self.description:
            text = f"{text}\n\n{self.description}"
        return text

    def render_help(self) -> None:
        """
        Print formatted help text using Rich output.

        Includes usage, description and one line per argument.
        """
        self.console.print(f"[bold]usage:[/bold] {escape(self.get_usage())}\n")

        if self.description:
            self.console.print(escape(self.description) + "\n")

        positional = [d for d in self._definitions.values() if d.is_positional]
        named = [d for d in self._definitions.values() if d.is_named]
        for title, group in (("positional:", positional), ("options:", named)):
            if not group:
                continue
            self.console.print(f"[bold]{title}[/bold]")
            for definition in group:
                flags = ", ".join(definition.names) or definition.metalabel
                arg_line = f"  {flags:<30} "
                help_text = definition.description or ""
                if help_text and len(flags) > 30:
                    help_text = f"\n{'':<33}{help_text}"
                self.console.print(escape(f"{arg_line}{help_text}"))

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        definitions = list(self._definitions.values())
        positional = sum(d.is_positional for d in definitions)
        required = sum(not d.is_optional for d in definitions)
        names = sum(len(d.names) for d in definitions if d.is_named)
        return (
            f"ArgumentParser(args={len(definitions)}, names={names}, "
            f"positional={positional}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)

# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argloom.

Two disjoint families of failure exist. Definition errors are programmer
mistakes in how a parser was built (bad option names, illegal positional
ordering, duplicate names) and are raised as exceptions. Input errors are
mistakes in the tokens handed to `parse_args` and are reported back as a
`ParseResult` with `error=True`; `ArgumentInputError` never escapes the parser.

All exceptions inherit from `ArgloomError`, the base exception for the package.

Exception Hierarchy:
- ArgloomError
    ├── ArgumentDefinitionError
    ├── ArgumentInputError
    ├── UnknownLabelError
    ├── ResultAssemblyError
    └── ConfigError
"""


class ArgloomError(Exception):
    """Base exception for Argloom."""


class ArgumentDefinitionError(ArgloomError):
    """Exception raised when an argument definition or the set of definitions is malformed."""


class ArgumentInputError(ArgloomError):
    """Exception raised when the input tokens do not satisfy the argument definitions."""


class UnknownLabelError(ArgloomError, KeyError):
    """Exception raised when a parse result is queried for a label the parser never registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ResultAssemblyError(ArgloomError):
    """Exception raised when captured values cannot be packed into a parse result."""


class ConfigError(ArgloomError):
    """Exception raised when an argument definition file cannot be loaded."""

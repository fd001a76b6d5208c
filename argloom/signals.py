# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the argument parser.

Signals subclass `BaseException` so they pass through `except Exception`
blocks untouched. They are not errors: `parse_args` catches them and turns
them into an ordinary `ParseResult`.

Signals:
- HelpSignal: A help name was found in the input; carries the help text.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argloom."""


class HelpSignal(FlowSignal):
    """Raised to short-circuit parsing and display help information."""

    def __init__(self, help_text: str = "", message: str = "Help signal received."):
        super().__init__(message)
        self.help_text = help_text

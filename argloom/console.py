# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argloom help and CLI output."""
from rich.console import Console

console = Console(highlight=False)

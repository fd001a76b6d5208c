# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argloom."""
import logging

logger: logging.Logger = logging.getLogger("argloom")

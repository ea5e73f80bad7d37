"""Diagnostic helpers for the sample test suite."""

from .config import get_log_level
from .diagnostics import DiagnosticContext, configure_logging

__all__ = ["DiagnosticContext", "configure_logging", "get_log_level", "__version__"]
__version__ = "0.1.0"

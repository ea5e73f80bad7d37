# src/sample/diagnostics.py

"""
Diagnostic messages for test runs.

A `DiagnosticContext` is the channel a test uses to attach free-text notes to
its run. Each message is kept on the context, so a test can inspect what it
reported, and is also emitted on the `sample.diagnostics` logger, so pytest's
log capture (and the rich console handler, when configured) shows it next to
the test outcome.

Diagnostics never change a test's outcome on their own.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import get_log_level

PACKAGE_LOGGER = "sample"
diagnostics_logger = logging.getLogger(__name__)


class DiagnosticContext:
    """Collects the diagnostic messages sent by a single test."""

    def __init__(self, test_name: str = "", logger: Optional[logging.Logger] = None):
        self.test_name = test_name
        self._logger = logger or diagnostics_logger
        self._messages: List[str] = []

    @property
    def messages(self) -> List[str]:
        """Returns the messages recorded so far, oldest first."""
        return list(self._messages)

    def send_diagnostic_message(self, message: str):
        """Records a diagnostic message and emits it at INFO level."""
        if not isinstance(message, str):
            raise TypeError(
                f"Diagnostic message must be a str, got {type(message).__name__}."
            )
        self._messages.append(message)
        text = f"[{self.test_name}] {message}" if self.test_name else message
        self._logger.info(text, extra={"test_name": self.test_name})

    def clear(self):
        """Forgets every recorded message."""
        self._messages.clear()


def configure_logging(level: Optional[int] = None) -> logging.Handler:
    """
    Attaches a RichHandler to the `sample` package logger.

    Calling this again swaps out the handler installed by the previous call.
    The logger keeps propagating, so records still reach pytest's capture.
    """
    if level is None:
        level = get_log_level()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler

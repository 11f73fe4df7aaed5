"""
diagnostics.py — Diagnostic hook for suspicious-but-legal inputs

Some inputs are accepted but deserve a warning: a float that already carries
representation error (0.1 + 0.2), or an export that knowingly loses precision
(to_major_units). The library never prints. It logs on the
``centsafe.diagnostics`` logger and forwards a `Diagnostic` to an optional hook
installed by the host application.

    from centsafe.diagnostics import diagnostic_hook

    seen = []
    with diagnostic_hook(seen.append):
        of(0.1 + 0.2, "USD")
    seen[0].code  # "float_artifact"
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional
import logging

logger = logging.getLogger(__name__)

FLOAT_ARTIFACT = "float_artifact"
LOSSY_CONVERSION = "lossy_conversion"


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic event."""
    code: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)


DiagnosticHook = Callable[[Diagnostic], Any]

_hook: Optional[DiagnosticHook] = None


def set_diagnostic_hook(hook: Optional[DiagnosticHook]) -> Optional[DiagnosticHook]:
    """Install a hook (or None to remove it). Returns the previous hook."""
    global _hook
    previous = _hook
    _hook = hook
    return previous


@contextmanager
def diagnostic_hook(hook: DiagnosticHook) -> Iterator[DiagnosticHook]:
    """Install a hook for the duration of a with-block."""
    previous = set_diagnostic_hook(hook)
    try:
        yield hook
    finally:
        set_diagnostic_hook(previous)


def emit_diagnostic(code: str, message: str, **context: Any) -> Diagnostic:
    """Log a diagnostic and forward it to the installed hook."""
    diagnostic = Diagnostic(code=code, message=message, context=context)
    logger.warning("[%s] %s", code, message)
    if _hook is not None:
        _hook(diagnostic)
    return diagnostic


# ==============================================================================
# HOST LOGGING SETUP
# ==============================================================================

class ProfessionalFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(shortlevel)-3s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        self.shortmap = {
            "DEBUG": "DBG",
            "INFO": "INF",
            "WARNING": "WRN",
            "ERROR": "ERR",
            "CRITICAL": "CRT",
        }

    def format(self, record) -> str:
        record.shortlevel = self.shortmap.get(record.levelname, "???")
        return super().format(record)


def configure_logging(level=logging.WARNING) -> logging.Logger:
    """
    Attach a stream handler to the ``centsafe`` logger.

    Meant for scripts and host applications; the library itself only ships a
    NullHandler. Calling it twice does not duplicate output.
    """
    package_logger = logging.getLogger("centsafe")
    package_logger.setLevel(level)
    if not any(
        isinstance(h, logging.StreamHandler)
        and isinstance(h.formatter, ProfessionalFormatter)
        for h in package_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(ProfessionalFormatter())
        package_logger.addHandler(handler)
    return package_logger

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

PACKAGE_LOGGER = "coherentnoise"

_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# Set per command; the render command appends the graph root once the config loads
_render_label: ContextVar[str] = ContextVar("coherentnoise_render_label", default="noise")
_handler: Optional[logging.Handler] = None


class _RenderLabelFilter(logging.Filter):
    """Stamp each record with the active ``command:root`` label."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.label = getattr(record, "label", None) or _render_label.get()
        return True


def parse_log_level(name: str) -> int:
    try:
        return _LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level '{name}'. Available: {', '.join(_LEVELS)}") from None


def setup_logging(level: str | int = "warning") -> None:
    """
    Configure the ``coherentnoise`` logger hierarchy.

    A single stderr handler is attached on first use; later calls only change
    the level. Records read ``[render:terrain] DEBUG: message``.
    """
    global _handler
    numeric_level = parse_log_level(level) if isinstance(level, str) else int(level)
    package = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter("[%(label)s] %(levelname)s: %(message)s"))
        _handler.addFilter(_RenderLabelFilter())
        package.addHandler(_handler)
    package.setLevel(numeric_level)


def set_command_context(command: str, root: Optional[str] = None) -> None:
    """Label subsequent records with the command and, once known, the graph root."""
    _render_label.set(f"{command}:{root}" if root else command)


def current_label() -> str:
    return _render_label.get()


def resolve_log_level(verbose: bool, debug: bool, log_level: Optional[str] = None) -> str:
    if log_level:
        parse_log_level(log_level)
        return log_level.lower()
    if debug:
        return "debug"
    if verbose:
        return "info"
    return "warning"


@contextmanager
def log_elapsed(logger: logging.Logger, message: str, *args) -> Iterator[None]:
    """Emit one INFO record with ``elapsed=<seconds>`` once the block finishes."""
    start = time.perf_counter()
    yield
    logger.info(message + " elapsed=%.3fs", *args, time.perf_counter() - start)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name is not None else PACKAGE_LOGGER)

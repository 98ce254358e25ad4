import logging
import sys
import contextvars
from typing import Optional

from hydramodel.models.settings import get_settings

# Context variable carrying the chain of model types currently being hydrated
_MODEL_PATH: contextvars.ContextVar[str] = contextvars.ContextVar("model_path", default="-")


class _HydrationScopeFilter(logging.Filter):
    """Logging filter that injects the current hydration path from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.model_path = _MODEL_PATH.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | model=%(model_path)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.WARNING)


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure the stdout handler and the hydramodel logger level.

    The handler is only attached when the root logger has none, so applications
    (and pytest's caplog) that configure logging themselves are left alone.
    Only the ``hydramodel`` namespace gets the requested level.

    Args:
        level: Log level for hydramodel logs (DEBUG, INFO, WARNING, ERROR).
               Defaults to the ``log_level`` of the active settings.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    level = level or get_settings().log_level
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_build_formatter())
        handler.addFilter(_HydrationScopeFilter())
        root.addHandler(handler)

    logging.getLogger("hydramodel").setLevel(_level(level))


def get_logger(name: str = "hydramodel") -> logging.Logger:
    """
    Get a module-specific logger whose records carry the hydration path.
    """
    configure_root_logger()
    logger = logging.getLogger(name)
    if not any(isinstance(f, _HydrationScopeFilter) for f in logger.filters):
        logger.addFilter(_HydrationScopeFilter())
    return logger


def current_model_path() -> str:
    return _MODEL_PATH.get()


def push_model(model_name: str) -> contextvars.Token:
    """Append a model name to the hydration path and return a token for later reset."""
    parent = _MODEL_PATH.get()
    path = model_name if parent == "-" else f"{parent}>{model_name}"
    return _MODEL_PATH.set(path)


def reset_model(token: Optional[contextvars.Token]) -> None:
    """Restore the hydration path using the provided token (if any)."""
    if token is None:
        return
    _MODEL_PATH.reset(token)

"""Logging utilities with per-run context fields."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

PACKAGE_LOGGER = "sbom_comply"


class ContextFormatter(logging.Formatter):
    """Formatter that prints a record's context fields before the message.

    "WARNING: [standard=bsi file=sbom.json] no components" for a record
    logged through a context adapter, the plain message otherwise.
    """

    def format(self, record: logging.LogRecord) -> str:
        fields = getattr(record, "extra_fields", None)
        if fields:
            context = " ".join(f"{k}={v}" for k, v in fields.items())
            record = logging.makeLogRecord(
                {**record.__dict__, "msg": f"[{context}] {record.getMessage()}", "args": None}
            )
        return super().format(record)


def level_from_flags(verbose: bool = False, quiet: bool = False) -> str:
    """Map the CLI verbosity flags to a level name. Verbose wins over quiet."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return "WARNING"


def configure_logging(
    level: str = "WARNING",
    format_string: str | None = None,
    structured: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Configure the sbom_comply logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        structured: Prefix messages with time and logger name
        stream: Destination stream, stderr by default
    """
    if format_string is None:
        if structured:
            format_string = "%(asctime)s %(levelname)s %(name)s %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ContextFormatter(format_string))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the sbom_comply hierarchy.

    Args:
        name: Module name (prefixed with sbom_comply when needed)
    """
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches run context to every record.

    Context is stored on the record as ``extra_fields``. Fields passed per
    call through ``extra={"fields": {...}}`` are merged over the adapter's.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        fields = dict(self.extra)
        fields.update(extra.pop("fields", {}))
        extra["extra_fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **context: Any) -> "ContextAdapter":
        """Get an adapter with additional context fields."""
        return ContextAdapter(self.logger, {**self.extra, **context})


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    """Get a logger whose records carry the given context fields.

    Example:
        logger = get_logger_with_context("runner", standard="ntia", file="sbom.json")
        logger.info("Running compliance check")
    """
    return ContextAdapter(get_logger(name), context)

"""Logging setup for the rpslkit command line.

Library modules only create loggers (``logging.getLogger(__name__)``) and
emit DEBUG records; handlers are installed here, once, by the CLI.
"""

import json
import logging
import logging.config
from typing import Any, Dict

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per log record, with ``extra=`` fields as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack_info"] = record.stack_info

        extra = {k: v for k, v in vars(record).items() if k not in _STANDARD_ATTRS}
        # extra={"extra": {...}} is flattened as well
        nested = extra.pop("extra", None)
        if isinstance(nested, dict):
            extra.update(nested)
        for key, value in extra.items():
            payload.setdefault(key, value)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "WARNING", json_logs: bool = False, force: bool = True) -> None:
    """Send root logging to stderr.

    Args:
        level: Logging level name (e.g. "DEBUG", "WARNING").
        json_logs: Emit JSON lines instead of the console format.
        force: Replace handlers installed by an earlier configuration.
    """
    if logging.getLogger().handlers and not force:
        return

    level = level.upper()
    formatter = {"()": JsonFormatter} if json_logs else {"format": CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"}
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"rpslkit": formatter},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "rpslkit",
                "level": level,
            },
        },
        "root": {"handlers": ["stderr"], "level": level},
    })

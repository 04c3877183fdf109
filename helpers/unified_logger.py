"""
Unified logging for dydx-v3-client

Every logger is a loguru logger bound to a component id such as
``CLIENT:DYDX:module=private`` or ``CORE:HTTP``. All of them share one console
sink on stderr; a rotating file sink is added when ``DYDX_LOG_DIR`` is set.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger as _logger

SOURCE_COLUMN_WIDTH = 45
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[source]}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level:<8} | "
    "{extra[component_id]:<40} | "
    "{name}:{function}:{line} | "
    "{message}"
)

# handler ids of the sinks added here; handlers owned by the host app are never touched
_sink_ids: Dict[str, int] = {}


def _source_column(record) -> bool:
    """Attach a right-aligned ``module:function:line`` column; keeps only component records."""
    if "component_id" not in record["extra"]:
        return False

    location = f":{record['function']}:{record['line']}"
    module = record["name"] or ""
    room = SOURCE_COLUMN_WIDTH - len(location)
    if len(module) > room:
        # keep the innermost dotted parts that fit
        parts = module.split(".")
        while len(parts) > 1 and len(".".join(parts)) + 3 > room:
            parts.pop(0)
        module = "..." + ".".join(parts)[-(room - 3):]

    record["extra"]["source"] = f"{module}{location}".rjust(SOURCE_COLUMN_WIDTH)
    return True


def _install_sinks(level: str) -> None:
    if "console" not in _sink_ids:
        _sink_ids["console"] = _logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=level,
            colorize=True,
            filter=_source_column,
            diagnose=False,
        )

    log_dir = os.getenv("DYDX_LOG_DIR")
    if log_dir and "file" not in _sink_ids:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        _sink_ids["file"] = _logger.add(
            str(path / f"dydx_client_{datetime.now():%Y%m%d_%H%M%S}.log"),
            format=FILE_FORMAT,
            level="DEBUG",
            filter=lambda record: "component_id" in record["extra"],
            rotation="50 MB",
            compression="zip",
            enqueue=True,
            diagnose=False,
        )


class UnifiedLogger:
    """
    Component-scoped logger.

    Records carry ``component_id`` in their extras so sinks can tell client
    modules apart. Call sites are reported as the caller's location.
    """

    def __init__(
        self,
        component_type: str,
        component_name: str,
        context: Optional[Dict[str, Any]] = None,
        log_level: str = "INFO",
    ):
        self.component_type = component_type.upper()
        self.component_name = component_name.upper()
        self.context = dict(context or {})
        self.log_level = log_level.upper()

        parts = [self.component_type, self.component_name]
        parts.extend(f"{key}={value}" for key, value in self.context.items())
        self.component_id = ":".join(parts)

        _install_sinks(self.log_level)
        self._logger = _logger.bind(component_id=self.component_id)

    def _emit(self, level: str, message: str, **kwargs) -> None:
        # depth=2 skips _emit and the public wrapper
        self._logger.opt(depth=2).log(level, message, **kwargs)

    def debug(self, message: str, **kwargs):
        self._emit("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs):
        self._emit("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._emit("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs):
        self._emit("ERROR", message, **kwargs)

    def log(self, message: str, level: str = "INFO", **kwargs):
        """Log at a level given by name; unknown names log at INFO."""
        level = level.upper()
        self._emit(level if level in LEVELS else "INFO", message, **kwargs)

    def with_context(self, **context) -> "UnifiedLogger":
        """Return a logger for the same component with extra context appended to its id."""
        return UnifiedLogger(
            self.component_type.lower(),
            self.component_name.lower(),
            {**self.context, **context},
            log_level=self.log_level,
        )


def get_logger(
    component_type: str,
    component_name: str,
    context: Optional[Dict[str, Any]] = None,
    log_level: Optional[str] = None,
) -> UnifiedLogger:
    """
    Create a component logger.

    Args:
        component_type: "client" or "core"
        component_name: e.g. "dydx", "http"
        context: Extra key/values appended to the component id
        log_level: Console level (defaults to env LOG_LEVEL or INFO)

    Examples:
        logger = get_logger("client", "dydx", {"module": "private"})
        logger = get_logger("core", "http")
    """
    return UnifiedLogger(
        component_type,
        component_name,
        context,
        log_level=log_level or os.getenv("LOG_LEVEL", "INFO"),
    )


def get_client_logger(module_name: Optional[str] = None, **context) -> UnifiedLogger:
    """Logger for the client facade and its API modules."""
    ctx = {"module": module_name} if module_name else {}
    ctx.update(context)
    return get_logger("client", "dydx", ctx)


def get_core_logger(module_name: str, **context) -> UnifiedLogger:
    """Logger for transport and signing helpers."""
    return get_logger("core", module_name, context)

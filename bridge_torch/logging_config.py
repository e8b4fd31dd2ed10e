"""Logging setup for applications that embed the engine.

The engine only emits records and never installs handlers itself. What each
module reports:

    bridge_torch.model              INFO    resets, final state; WARNING on unknown actors
    bridge_torch.preset_repository  INFO    activation; WARNING on import name clashes
    bridge_torch.preset_import      INFO    batch summary; WARNING per rejected object
    bridge_torch.scheduler          DEBUG   one record per crossing (the turn trace)
    bridge_torch.registry           DEBUG   one record per registered actor

Crossing records carry ``turn``, ``actor_ids``, ``cost``, ``rule`` and
``time_elapsed`` as record attributes, so a handler can format or collect them
without parsing the message.
"""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "bridge_torch"
TURN_LOGGER = "bridge_torch.scheduler"
ENGINE_LOGGERS = (
    "bridge_torch.model",
    "bridge_torch.preset_repository",
    "bridge_torch.preset_import",
    "bridge_torch.scheduler",
    "bridge_torch.registry",
)

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"
LOG_LEVEL_ENV_VAR = "BRIDGE_TORCH_LOG_LEVEL"
TRACE_TURNS_ENV_VAR = "BRIDGE_TORCH_TRACE_TURNS"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def configure_logging(
    level: str | None = None,
    *,
    trace_turns: bool | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Route engine logging to the console.

    Every engine module inherits the package level, except that the turn
    trace can be switched on alone so a run prints each crossing without the
    registry's per-actor DEBUG noise.

    Args:
        level: Package log level. Falls back to ``BRIDGE_TORCH_LOG_LEVEL``,
            then INFO.
        trace_turns: Log every crossing at DEBUG whatever ``level`` is.
            Falls back to ``BRIDGE_TORCH_TRACE_TURNS``.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger (``bridge_torch``).
    """
    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV_VAR)
    resolved_level = (raw_level or "INFO").upper()
    if trace_turns is None:
        trace_turns = _env_flag(TRACE_TURNS_ENV_VAR)

    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved_level)
    for logger_name in ENGINE_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.NOTSET)
    if trace_turns:
        logging.getLogger(TURN_LOGGER).setLevel(logging.DEBUG)

    package_logger.debug(
        "Logging configured",
        extra={"level": resolved_level, "trace_turns": trace_turns},
    )
    return package_logger

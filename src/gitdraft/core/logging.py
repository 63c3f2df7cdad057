"""Structured logging for gitdraft.

stdout is reserved for the change summary and prompt, so every log output
defaults to stderr. Each CLI invocation gets a short run id that is attached
to all of its events through structlog's contextvars.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from gitdraft.config.models import LoggingConfig, LogOutputConfig

_RUN_ID_KEY = "run_id"


def get_run_id() -> str | None:
    return structlog.contextvars.get_contextvars().get(_RUN_ID_KEY)


def set_run_id(run_id: str | None = None) -> str:
    """Bind a run id (generated when omitted) to every subsequent event."""
    rid = run_id or uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(**{_RUN_ID_KEY: rid})
    return rid


def clear_run_id() -> None:
    structlog.contextvars.unbind_contextvars(_RUN_ID_KEY)


def _resolve_level(name: str | None, fallback: int) -> int:
    if not name:
        return fallback
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else fallback


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """Configure structlog on top of stdlib logging.

    Either pass a LoggingConfig (one handler per output) or use the simple
    json_format/level pair for a single stderr handler. Safe to call more than
    once; previous root handlers are replaced.
    """
    from gitdraft.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = _resolve_level(config.level, logging.WARNING)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfigured per CLI invocation (and per test), so no caching
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(root_level)

    for output in config.outputs:
        root.addHandler(_build_handler(output, root_level, shared))


def _build_handler(
    output: LogOutputConfig,
    inherited_level: int,
    shared: list[structlog.types.Processor],
) -> logging.Handler:
    handler: logging.Handler
    if output.destination == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif output.destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    if output.format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        on_terminal = output.destination in ("stderr", "stdout") and handler.stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(
            colors=on_terminal,
            pad_event_to=0,
            pad_level=False,
        )

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
    )
    handler.setLevel(_resolve_level(output.level, inherited_level))
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]

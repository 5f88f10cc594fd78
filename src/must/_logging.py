"""Structured logging for must.

must only logs at recovery boundaries, and only once logging has been
configured (see ``must.init``). Output goes through the ``must`` logger
namespace; the root logger and other libraries' handlers are left alone.

A failure passed as ``failure=`` to any must logger is expanded into the
fields of its ``Failure`` struct, so every renderer and log hook sees the
same flat event:

    {'event': 'must.recovered', 'boundary': 'load', 'error': 'boom',
     'kind': 'ValueError', 'ctx': 'open(a.txt)', 'file': '/src/app.py',
     'line': 14, ...}
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec
import structlog

from must.errors import Failure, MustError

if TYPE_CHECKING:
    from collections.abc import Callable

    LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

LOGGER_NAME = 'must'


def expand_failure(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Replace a ``failure`` entry with the fields of its Failure struct."""
    failure = event_dict.get('failure')
    if isinstance(failure, MustError):
        failure = failure.to_struct()
    if isinstance(failure, Failure):
        del event_dict['failure']
        event_dict.update(msgspec.structs.asdict(failure))
    return event_dict


# --- Log hooks ---

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of every must log event.

    Hooks see the event after failures have been expanded, before it is
    rendered. A hook that raises is skipped for that event.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue
    return event_dict


# --- Configuration ---


def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        expand_failure,
        run_log_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route must's log events to stderr through structlog.

    Calling it again replaces the previous handler.

    Args:
        level: Level name for the ``must`` logger. Unknown names fall back to INFO.
        json_output: Render JSON lines if True, console output otherwise.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    must_logger = logging.getLogger(LOGGER_NAME)
    must_logger.handlers.clear()
    must_logger.addHandler(handler)
    must_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    must_logger.propagate = False


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger, ``must`` by default.

    Names outside the ``must`` namespace are not routed by ``configure_logging``.
    """
    return structlog.get_logger(name)

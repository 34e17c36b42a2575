"""Structured logging for fallible.

Library loggers are structlog wrappers around stdlib loggers in the
``fallible`` namespace. Their event dicts are handed to registered hooks
and then to stdlib logging as ``extra`` fields, so:

- with no logging set up, nothing is printed (``NullHandler``);
- with any stdlib setup (``logging.basicConfig``, dictConfig, ...) records
  flow through the application's handlers and hooks still fire;
- ``configure_logging`` is an optional one-call setup rendering JSON or
  console output through structlog's ProcessorFormatter.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, MutableMapping

    type LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

logging.getLogger('fallible').addHandler(logging.NullHandler())

_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event dict logged through fallible loggers."""
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``; unknown hooks are ignored."""
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    for hook in _hooks:
        try:
            hook(dict(event_dict))
        except Exception:
            pass  # a broken hook must not turn a log call into a failure
    return event_dict


def get_logger(name: str = 'fallible') -> Any:
    """Return a structlog BoundLogger on top of the stdlib logger ``name``.

    The processor chain is fixed here and does not depend on
    ``structlog.configure``: level filtering by the stdlib logger, logger
    name and level, hooks, then conversion to stdlib ``extra`` kwargs.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _run_hooks,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Install a structured stderr handler on the root logger.

    Replaces the root handlers. Records from fallible loggers arrive as
    stdlib records carrying their fields as extras; ``ExtraAdder`` puts
    them back into the rendered event. Hooks are not part of this chain,
    fallible loggers already ran them. Loggers obtained from
    ``structlog.get_logger`` afterwards run hooks through the structlog
    chain configured here.

    Args:
        level: Root logging level ("DEBUG", "INFO", ...). Unknown names mean INFO.
        json_output: Render JSON lines (True) or coloured console output.
    """
    import structlog

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            *pre_chain,
            _run_hooks,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

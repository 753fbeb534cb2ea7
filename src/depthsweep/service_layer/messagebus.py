"""Command dispatch for the service layer.

Entrypoints never call handlers directly: they build a command and hand it
to `MessageBus.handle`, which looks up the handler registered for the
command's exact type, runs it and returns its result.
"""

import logging
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from .commands import Command

logger = logging.getLogger(__name__)

Handler = Callable[[Command], Any]

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised by `MessageBus.handle` for a command type nobody registered."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")
        self.command = cmd


def _handler_name(handler: Callable[..., Any]) -> str:
    # bootstrap wraps handlers in functools.partial to inject dependencies
    while isinstance(handler, partial):
        handler = handler.func
    return getattr(handler, "__name__", repr(handler))


class MessageBus:
    """Synchronous command bus.

    Args:
        command_handlers: Handler per command type. Each handler takes the
            command as its only argument; the bootstrap binds everything else
            (contract factory, reporter, clock, ...) beforehand.

    A handler's exception is logged with the command and the handler name,
    then re-raised as is, so the CLI can still map e.g. an out-of-gas revert
    and a result mismatch to different exit codes.
    """

    def __init__(self, command_handlers: Mapping[type[Command], Handler]) -> None:
        self._command_handlers = dict(command_handlers)

    def handle(self, cmd: Command) -> Any:
        """Run the handler registered for ``type(cmd)`` and return its result.

        Raises:
            NoHandlerForCommand: If no handler is registered for the command type.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = _handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, name)
        try:
            return handler(cmd)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Exception handling command %s with handler %s", cmd, name)
            raise

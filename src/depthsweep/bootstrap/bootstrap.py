"""Bootstrap the message bus with handlers and their dependencies."""

from __future__ import annotations

import inspect
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from depthsweep import config
from depthsweep.adapters.contracts import GasSchedule, InMemoryContractFactory
from depthsweep.adapters.id_generators import ULIDGenerator
from depthsweep.adapters.reporters import LoggingReporter
from depthsweep.service_layer.handlers import COMMAND_HANDLERS
from depthsweep.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from depthsweep.interfaces.contract import ContractFactory
    from depthsweep.interfaces.id_generator import IdGenerator
    from depthsweep.interfaces.reporter import SweepReporter
    from depthsweep.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    settings: config.Settings
    message_bus: MessageBus


def build_contract_factory(settings: config.Settings) -> InMemoryContractFactory:
    """Build the in-memory contract factory using the configured gas limits."""
    schedule = GasSchedule(
        gas_limit=settings.gas_limit, max_call_depth=settings.max_call_depth
    )
    return InMemoryContractFactory(schedule)


def build_message_bus(
    dependencies: Mapping[str, object],
    command_handlers: Mapping[type[Command], Callable[..., Any]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(  # pylint: disable=too-many-arguments
    settings: config.Settings | None = None,
    *,
    factory: ContractFactory | None = None,
    id_generator: IdGenerator | None = None,
    reporter: SweepReporter | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> AppContainer:
    """Bootstrap the message bus.

    Every collaborator can be overridden; defaults are the in-memory metered
    contract factory, ULID run ids and a logging reporter.
    """
    settings = settings or config.load_settings()
    dependencies = {
        "factory": factory or build_contract_factory(settings),
        "id_generator": id_generator or ULIDGenerator(),
        "reporter": reporter or LoggingReporter(),
        "clock": clock,
    }
    message_bus = build_message_bus(dependencies, COMMAND_HANDLERS)

    return AppContainer(settings=settings, message_bus=message_bus)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)

"""DEPTHSWEEP sweep commands.

``sweep`` runs the equivalence check: one deployment, then iterativeSum and
recursiveSum for every depth in ascending order, stopping at the first
failure. Per-depth diagnostic lines (``depth: 1\t sum = 1``) go to stdout as
they are produced; the verdict goes to stderr.

``probe`` and ``find-limit`` explore the resource-exhaustion boundary. They
classify failures instead of asserting, so they exit 0 whatever the outcome.

Failure modes of ``sweep`` map to distinct exit codes (see `ExitCode`) so a
calling harness can tell an out-of-gas revert from a result mismatch.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from enum import IntEnum

import click

from depthsweep import config
from depthsweep.adapters.reporters import (
    FanOutReporter,
    LoggingReporter,
    format_record,
)
from depthsweep.bootstrap import AppContainer, bootstrap
from depthsweep.domain.errors import EquivalenceMismatchError, InvalidDepthRangeError
from depthsweep.domain.value_objects import DepthRecord, ProbeOutcome, SweepReport
from depthsweep.interfaces.contract import ContractError, DeploymentError
from depthsweep.interfaces.reporter import SweepReporter
from depthsweep.service_layer import commands
from depthsweep.service_layer.errors import SweepTimeoutError

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments, too-many-positional-arguments


class ExitCode(IntEnum):
    """Process exit codes of ``depthsweep sweep``."""

    OK = 0
    MISMATCH = 1
    CALL_FAILED = 3
    DEPLOYMENT_FAILED = 4
    TIMEOUT = 5


class EchoReporter(SweepReporter):  # pylint: disable=too-few-public-methods
    """Print each diagnostic line as soon as its depth has been compared."""

    def __init__(self, err: bool = False) -> None:
        self.err = err

    def report(self, record: DepthRecord) -> None:
        click.echo(format_record(record), err=self.err)


# ============================================================================
#                               Helpers
# ============================================================================


def _settings(gas_limit: int | None = None) -> config.Settings:
    try:
        settings = config.load_settings()
    except config.InvalidSettingError as e:
        raise click.UsageError(str(e)) from e
    if gas_limit is not None:
        settings = dataclasses.replace(settings, gas_limit=gas_limit)
    return settings


def _container(
    gas_limit: int | None, reporter: SweepReporter | None = None
) -> AppContainer:
    settings = _settings(gas_limit)
    logger.debug("Settings: %s", settings)
    return bootstrap(settings, reporter=reporter)


def _finite(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: float | None,
) -> float | None:
    # FloatRange lets "nan" and "inf" through
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite number of seconds.")
    return value


gas_limit_option = click.option(
    "--gas-limit",
    type=click.IntRange(min=0),
    default=None,
    help="Gas budget of each call (default: DEPTHSWEEP_GAS_LIMIT or 1000000).",
)


# ============================================================================
#                               Commands
# ============================================================================


@click.command()
@click.option(
    "--start-depth",
    type=click.IntRange(min=1),
    default=None,
    help="First depth of the sweep (default: DEPTHSWEEP_START_DEPTH or 1).",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Last depth of the sweep, inclusive (default: DEPTHSWEEP_MAX_DEPTH or 36).",
)
@click.option(
    "--timeout",
    "timeout_s",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    callback=_finite,
    help="Wall-clock budget in seconds (default: DEPTHSWEEP_TIMEOUT or 100).",
)
@gas_limit_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the final report as JSON on stdout; diagnostics move to stderr.",
)
@click.pass_context
def sweep(
    ctx: click.Context,
    start_depth: int | None,
    max_depth: int | None,
    timeout_s: float | None,
    gas_limit: int | None,
    as_json: bool,
) -> None:
    """Check recursiveSum(d) == iterativeSum(d) for every depth d in the range."""

    reporter = FanOutReporter(LoggingReporter(logging.DEBUG), EchoReporter(err=as_json))
    container = _container(gas_limit, reporter)
    settings = container.settings
    cmd = commands.RunDepthSweep(
        start_depth=start_depth if start_depth is not None else settings.start_depth,
        max_depth=max_depth if max_depth is not None else settings.max_depth,
        timeout_s=timeout_s if timeout_s is not None else settings.timeout_s,
    )

    try:
        report: SweepReport = container.message_bus.handle(cmd)
    except InvalidDepthRangeError as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    except EquivalenceMismatchError as e:
        error(str(e))
        ctx.exit(ExitCode.MISMATCH)
    except DeploymentError as e:
        error(str(e))
        ctx.exit(ExitCode.DEPLOYMENT_FAILED)
    except ContractError as e:
        error(str(e))
        ctx.exit(ExitCode.CALL_FAILED)
    except SweepTimeoutError as e:
        error(str(e))
        ctx.exit(ExitCode.TIMEOUT)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    success(
        f"recursiveSum and iterativeSum agree at all {len(report.records)} depths "
        f"({report.depths.start}..{report.depths.stop}); contract {report.contract_address}."
    )


@click.command()
@click.option(
    "--depth",
    type=click.IntRange(min=0),
    default=None,
    help="Depth to probe (default: DEPTHSWEEP_PROBE_DEPTH or 1024).",
)
@gas_limit_option
def probe(depth: int | None, gas_limit: int | None) -> None:
    """Call both sums once at a (deep) depth and report how the call ended."""

    container = _container(gas_limit)
    depth = depth if depth is not None else container.settings.probe_depth
    try:
        result = container.message_bus.handle(commands.ProbeExhaustion(depth=depth))
    except DeploymentError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"depth: {result.depth}\t outcome = {result.outcome.value}")
    match result.outcome:
        case ProbeOutcome.EQUAL:
            success(f"Both sums returned {result.recursive} at depth {depth}.")
        case ProbeOutcome.MISMATCH:
            error(
                f"iterativeSum returned {result.iterative}, "
                f"recursiveSum returned {result.recursive} at depth {depth}."
            )
        case _:
            warn(result.detail or result.outcome.value)


@click.command(name="find-limit")
@click.option("--low", type=click.IntRange(min=0), default=1, show_default=True)
@click.option(
    "--high",
    type=click.IntRange(min=0),
    default=None,
    help="Upper bound of the search (default: DEPTHSWEEP_PROBE_DEPTH or 1024).",
)
@gas_limit_option
def find_limit(low: int, high: int | None, gas_limit: int | None) -> None:
    """Find the smallest depth at which recursiveSum reverts."""

    container = _container(gas_limit)
    high = high if high is not None else container.settings.probe_depth
    if low > high:
        raise click.BadParameter(f"--low {low} is above --high {high}")
    try:
        limit = container.message_bus.handle(
            commands.FindExhaustionDepth(low=low, high=high)
        )
    except DeploymentError as e:
        raise click.ClickException(str(e)) from e

    if limit is None:
        success(f"recursiveSum succeeds at every depth up to {high}.")
        return
    click.echo(f"limit: {limit}")
    warn(f"recursiveSum first reverts at depth {limit}.")

"""DEPTHSWEEP CLI entry point.

The top-level ``depthsweep`` group (Click-Extra) owns the logging options and
sets up logging before any subcommand runs.

Subcommands
- ``depthsweep sweep``: compare recursiveSum and iterativeSum over a depth range.
- ``depthsweep probe``: classify the outcome of a single (deep) call.
- ``depthsweep find-limit``: search the depth at which recursiveSum first fails.

Examples
    $ depthsweep --version
    $ depthsweep -v sweep --max-depth 36
    $ depthsweep probe --depth 1024
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from depthsweep import __version__
from depthsweep.logging import (
    LoggingSetup,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .sweep import find_limit, probe, sweep

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("depthsweep", appauthor=False, ensure_exists=True))
    / "latest.log"
)

HELP = """DEPTHSWEEP command-line interface.

    DEPTHSWEEP deploys a summation contract into a gas-metered execution
    environment and checks that its recursive entry point returns exactly what
    its iterative entry point returns, depth after depth, stopping at the first
    disagreement. It also probes how deep the recursion can go before the call
    runs out of gas.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  EIP-150 (gas forwarding): "
        + hyperlink("https://eips.ethereum.org/EIPS/eip-150"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Developer mode: DEBUG console output with source file and line.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="DEPTHSWEEP_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder dumps its buffer to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="DEPTHSWEEP_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer the most recent DEBUG records, whatever -v/-q say, and write "
        "them to --log-path as soon as a WARNING or ERROR is logged. A failed "
        "sweep thereby leaves the gas used by each call on disk."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight-recorder buffer on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level of one logger as NAME=LEVEL, applied to the console "
        "and the flight recorder alike. Repeatable, e.g. "
        "-L depthsweep.adapters=INFO; DEPTHSWEEP_LOGGER_LEVEL takes a "
        "comma or space separated list."
    ),
)
@clickx.pass_context
def depthsweep(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """DEPTHSWEEP command-line interface."""

    setup = LoggingSetup(
        console_level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None means "let the terminal decide"
        log_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_exit=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(setup)
    log_startup(logger, setup, handlers, __version__)

    # flushes the flight recorder once the subcommand has returned
    ctx.call_on_close(logging.shutdown)


depthsweep.add_command(sweep)
depthsweep.add_command(probe)
depthsweep.add_command(find_limit)

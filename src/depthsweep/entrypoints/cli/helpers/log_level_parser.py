"""Parsing of the ``-L/--logger-level NAME=LEVEL`` option.

The option is repeatable on the command line, and its environment variable
(``DEPTHSWEEP_LOGGER_LEVEL``) holds a comma or space separated list.
"""

import logging
import re
from collections.abc import Iterable, Iterator

import click

# click-extra logs its own option handling at DEBUG; keep it out of -vv output.
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _pairs(value: str | Iterable[str]) -> Iterator[tuple[str, str]]:
    chunks = [value] if isinstance(value, str) else value
    for chunk in chunks:
        for item in filter(None, _SEPARATORS.split(chunk)):
            name, sep, level = item.partition("=")
            if not sep or not name:
                raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
            yield name, level


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into ``{name: numeric level}``.

    The result starts from `DEFAULT_LIB_LEVELS`; later items override earlier
    ones. Level names are case-insensitive.

    Raises:
        click.BadParameter: On an item without ``=`` or an unknown level name.
    """
    known = logging.getLevelNamesMapping()
    levels = dict(DEFAULT_LIB_LEVELS)
    for name, level in _pairs(value):
        if (number := known.get(level.upper())) is None:
            raise click.BadParameter(f"Invalid log level: {level}")
        levels[name] = number
    return levels

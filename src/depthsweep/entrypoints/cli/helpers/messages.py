"""Terminal message helpers for the DEPTHSWEEP CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages write to stderr so stdout carries only the per-depth diagnostics
(or the JSON report).
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, otherwise "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  recursiveSum(1024) ran out of gas.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  All 36 depths agree.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  Mismatch at depth 5.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)

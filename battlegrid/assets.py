"""Symbols, colours and text art used to draw the battlefield."""

INFANTRY_SYMBOL = "I"
CAVALRY_SYMBOL = "C"
ARCHER_SYMBOL = "A"

_LOGO_ROWS = (
    r"  ____        _   _   _       _____      _     _ ",
    r" |  _ \      | | | | | |     / ____|    (_)   | |",
    r" | |_) | __ _| |_| |_| | ___| |  __ _ __ _  __| |",
    r" |  _ < / _` | __| __| |/ _ \ | |_ | '__| |/ _` |",
    r" | |_) | (_| | |_| |_| |  __/ |__| | |  | | (_| |",
    r" |____/ \__,_|\__|\__|_|\___|\_____|_|  |_|\__,_|",
)

GAME_LOGO = "\n" + "\n".join(_LOGO_ROWS)


def _ansi(code: int) -> str:
    """Return the ANSI select-graphic-rendition sequence for ``code``."""
    return f"\033[{code}m"


RESET_TEXT = _ansi(0)
GREEN_TEXT = _ansi(32)
BROWN_TEXT = _ansi(33)
BLUE_TEXT = _ansi(34)
RED_TEXT = _ansi(31)

GRASS_TEXTURE = "\u2592" * 3
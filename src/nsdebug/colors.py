"""Deterministic namespace colors."""

from __future__ import annotations

import hashlib
from typing import Any, Callable

from rich.color import Color, ColorSystem
from rich.style import Style

Colorizer = Callable[..., str]


def color_for(text: str) -> Color:
    """Derive a stable RGB color from a string.

    The first three bytes of the MD5 digest of the UTF-8 text are used as the
    red, green and blue components, so the same namespace gets the same color
    in every process.

    Args:
        text: Usually a logger namespace

    Returns:
        Color: 24-bit color
    """
    digest = hashlib.md5(text.encode("utf-8")).digest()
    return Color.from_rgb(digest[0], digest[1], digest[2])


def plain(*values: Any) -> str:
    """Concatenate values without coloring them."""
    return "".join(str(v) for v in values)


def make_colorizer(namespace: str) -> Colorizer:
    """Build a function that wraps its arguments in the namespace color.

    Args:
        namespace: Namespace the color is derived from

    Returns:
        Colorizer: Function concatenating its arguments into an ANSI-colored string
    """
    style = Style(color=color_for(namespace))

    def colorize(*values: Any) -> str:
        return style.render(plain(*values), color_system=ColorSystem.TRUECOLOR)

    return colorize

from __future__ import annotations

import random

Color = tuple[int, int, int]

FOOD_STYLES = {
    "red-square": ((255, 0, 0), "square"),
    "blue-circle": ((0, 170, 255), "circle"),
    "yellow-diamond": ((255, 221, 51), "diamond"),
    "random": (None, "square"),
}
DEFAULT_FOOD_STYLE = "red-square"
DEFAULT_SNAKE_COLOR = "#00ff00"


def parse_hex(color: str) -> Color:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected #rrggbb, got {color!r}")
    num = int(value, 16)
    return ((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)


def lighten(color: Color, amount: int) -> Color:
    """Shift every channel by `amount`, clamped to 0..255."""
    return tuple(min(255, max(0, c + amount)) for c in color)  # type: ignore[return-value]


def random_color(rng: random.Random | None = None) -> Color:
    rng = rng or random
    return (rng.randint(30, 229), rng.randint(30, 229), rng.randint(30, 229))


def food_appearance(style: str, rng: random.Random | None = None) -> tuple[Color, str]:
    if style not in FOOD_STYLES:
        raise ValueError(f"unknown food style: {style}")
    color, shape = FOOD_STYLES[style]
    if color is None:
        color = random_color(rng)
    return color, shape

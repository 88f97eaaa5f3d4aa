"""Traffic light colors.

A color is an opaque string. The three named values below are the ones
observers react to specifically; any other string is still a legal color and
falls into each observer's default reaction.
"""

from typing import TypeAlias

Color: TypeAlias = str


class TrafficColors:
    RED: Color = "red"
    GREEN: Color = "green"
    YELLOW: Color = "yellow"

    ALL: tuple[Color, ...] = (RED, GREEN, YELLOW)


def is_known_color(color: Color) -> bool:
    return color in TrafficColors.ALL

"""Keyword-driven color precedence for project labels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

ColorPrecedenceTable = dict[str, str]


class LabelColor(StrEnum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"
    GREY = "grey"

    @property
    def terminal_name(self) -> str:
        if self in (LabelColor.GRAY, LabelColor.GREY):
            return "bright_black"
        return self.value


def resolve_color(name: str) -> LabelColor | None:
    """Map a configured color name to a supported color, ``None`` when unsupported."""

    try:
        return LabelColor(name.strip().lower())
    except ValueError:
        return None


def pick_color(key: str, table: Mapping[str, str]) -> LabelColor | None:
    """Return the color of the first keyword (in table order) found in ``key``.

    Only the first matching keyword is considered; when its color is unsupported the
    label stays plain even if a later keyword would also match.
    """

    lowered = key.lower()
    for keyword, color_name in table.items():
        if keyword and keyword.lower() in lowered:
            return resolve_color(color_name)
    return None


@dataclass(frozen=True, slots=True)
class TaggedLabel:
    text: str
    color: LabelColor | None = None


def tag_label(label: str, key: str, table: Mapping[str, str]) -> TaggedLabel:
    return TaggedLabel(text=label, color=pick_color(key, table))

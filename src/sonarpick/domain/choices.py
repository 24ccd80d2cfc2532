"""Turn the visible catalog into prompt rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .colors import tag_label
from .keys import display_name
from .model import Choice, ProjectEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def format_label(position: int, entry: ProjectEntry) -> str:
    return f"{position}. {display_name(entry.key, entry.name)} ({entry.key})"


def build_choices(
    entries: Iterable[ProjectEntry],
    *,
    prior: frozenset[str],
    colors: Mapping[str, str],
) -> tuple[Choice, ...]:
    return tuple(
        Choice(
            label=tag_label(format_label(position, entry), entry.key, colors),
            key=entry.key,
            preselected=entry.key in prior,
        )
        for position, entry in enumerate(entries, start=1)
    )

"""Filter and sort stages applied to the fetched catalog."""

from __future__ import annotations

import locale
from typing import TYPE_CHECKING

from .keys import decompose
from .model import ProjectEntry, SortPolicy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

SortKey = tuple[str, ...]


def filter_entries(entries: Iterable[ProjectEntry], term: str | None) -> tuple[ProjectEntry, ...]:
    """Keep entries whose key or name contains ``term``, ignoring case.

    An empty or missing term keeps everything in the original order.
    """

    items = tuple(entries)
    if not term:
        return items
    needle = term.casefold()
    return tuple(entry for entry in items if _matches(entry, needle))


def _matches(entry: ProjectEntry, needle: str) -> bool:
    if needle in entry.key.casefold():
        return True
    return entry.name is not None and needle in entry.name.casefold()


def _collation_key(value: str) -> SortKey:
    # casefolded text decides the order; the raw text only breaks ties between case variants
    return (locale.strxfrm(value.casefold()), locale.strxfrm(value))


def _component_branch(entry: ProjectEntry) -> SortKey:
    parts = decompose(entry.key)
    return (*_collation_key(parts.component), *_collation_key(parts.branch))


def _group_component_branch(entry: ProjectEntry) -> SortKey:
    parts = decompose(entry.key)
    return (
        *_collation_key(parts.group),
        *_collation_key(parts.component),
        *_collation_key(parts.branch),
    )


_SORT_KEYS: dict[SortPolicy, Callable[[ProjectEntry], SortKey]] = {
    SortPolicy.COMPONENT_BRANCH: _component_branch,
    SortPolicy.GROUP_COMPONENT_BRANCH: _group_component_branch,
}


def sort_entries(
    entries: Iterable[ProjectEntry],
    policy: SortPolicy | str = SortPolicy.DEFAULT,
) -> tuple[ProjectEntry, ...]:
    items = tuple(entries)
    sort_key = _SORT_KEYS.get(SortPolicy(policy))
    if sort_key is None:
        return items
    # sorted() is stable: equal keys keep their relative input order
    return tuple(sorted(items, key=sort_key))

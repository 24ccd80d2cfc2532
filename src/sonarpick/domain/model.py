"""Domain types for the project catalog (pure, dependency-light)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .colors import TaggedLabel

SelectionSet = frozenset[str]


class SortPolicy(StrEnum):
    DEFAULT = "default"
    COMPONENT_BRANCH = "component_branch"
    GROUP_COMPONENT_BRANCH = "group_component_branch"


@dataclass(frozen=True, slots=True)
class ProjectEntry:
    """One monitored SonarQube project as listed by the server."""

    key: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class KeyParts:
    group: str = ""
    organ: str = ""
    component: str = ""
    branch: str = ""
    optionals: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Paging:
    page_index: int
    page_size: int
    total: int


@dataclass(frozen=True, slots=True)
class CatalogPage:
    """A single page of the catalog plus the server's paging descriptor."""

    components: tuple[ProjectEntry, ...]
    paging: Paging

    def __len__(self) -> int:
        return len(self.components)


@dataclass(frozen=True, slots=True)
class Choice:
    """One row handed to the interactive prompt."""

    label: TaggedLabel
    key: str
    preselected: bool = False


@dataclass(frozen=True, slots=True)
class SelectionOutcome:
    """Result of one configuration run, before it reaches the persistence sink."""

    selection: SelectionSet
    visible: SelectionSet = field(default_factory=frozenset)
    kept_hidden: SelectionSet = field(default_factory=frozenset)

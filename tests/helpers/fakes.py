"""Reusable fakes for the catalog pipeline ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sonarpick.config.dashboard import DashboardSettings
    from sonarpick.domain.model import Choice, ProjectEntry


@dataclass
class FakeFetcher:
    entries: tuple[ProjectEntry, ...]
    calls: int = 0

    def __call__(self) -> tuple[ProjectEntry, ...]:
        self.calls += 1
        return self.entries


@dataclass
class FakePrompt:
    """Checks exactly ``answer`` (restricted to the keys it was shown)."""

    answer: frozenset[str]
    seen: list[Choice] = field(default_factory=list)
    calls: int = 0

    def __call__(self, choices: Sequence[Choice], *, message: str) -> frozenset[str]:
        del message
        self.calls += 1
        self.seen.extend(choices)
        shown = {choice.key for choice in choices}
        return frozenset(self.answer & shown)


@dataclass
class MemorySink:
    saved: list[DashboardSettings] = field(default_factory=list)

    def save(self, settings: DashboardSettings) -> None:
        self.saved.append(settings)

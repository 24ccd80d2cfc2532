"""Ports for fetching the project catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sonarpick.domain.model import ProjectEntry


@runtime_checkable
class CatalogFetcher(Protocol):
    """Callable port returning every project the remote service lists."""

    def __call__(self) -> tuple[ProjectEntry, ...]: ...


__all__ = ["CatalogFetcher"]

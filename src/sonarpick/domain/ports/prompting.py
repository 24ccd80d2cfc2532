"""Port for the interactive selection step."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sonarpick.domain.model import Choice


class SelectionAborted(Exception):  # noqa: N818
    """Raised when the operator leaves the prompt without confirming."""


@runtime_checkable
class SelectionPrompt(Protocol):
    """Shows the choices and returns the keys left checked."""

    def __call__(self, choices: Sequence[Choice], *, message: str) -> frozenset[str]: ...


__all__ = ["SelectionAborted", "SelectionPrompt"]

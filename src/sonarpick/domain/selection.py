"""Reconciliation of the operator's choice with the previously saved selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import SelectionOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable


def reconcile(
    prior: Iterable[str],
    visible: Iterable[str],
    chosen: Iterable[str],
) -> frozenset[str]:
    """Merge the checked keys with the saved selection.

    Visible keys follow the checkbox state exactly, so a visible key the operator
    unchecked is dropped even if it was saved before. Saved keys the operator could
    not see (filtered out, or no longer in the catalog) are kept as they were.
    """

    visible_keys = frozenset(visible)
    hidden_prior = frozenset(prior) - visible_keys
    return hidden_prior | (frozenset(chosen) & visible_keys)


def reconcile_outcome(
    prior: Iterable[str],
    visible: Iterable[str],
    chosen: Iterable[str],
) -> SelectionOutcome:
    prior_keys = frozenset(prior)
    visible_keys = frozenset(visible)
    return SelectionOutcome(
        selection=reconcile(prior_keys, visible_keys, chosen),
        visible=visible_keys,
        kept_hidden=prior_keys - visible_keys,
    )

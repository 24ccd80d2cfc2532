"""Environment and settings loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_values(
    names: Sequence[str],
    *,
    fallbacks: Mapping[str, str | None] | None = None,
    source: str = "environment",
) -> dict[str, str]:
    """Return the named values from the environment, falling back to ``fallbacks``.

    Every missing or blank name is collected before raising, so the operator sees the
    whole list at once instead of fixing one value per run.
    """

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if _is_blank(value) and fallbacks is not None:
            value = fallbacks.get(name)
        if value is None or _is_blank(value):
            missing.append(name)
            continue
        values[name] = value.strip()

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(
            f"Missing configuration for: {missing_list} ({source})", names=sorted(missing)
        )

    return values


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    return require_values(names)

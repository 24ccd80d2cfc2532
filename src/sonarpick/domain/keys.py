"""Decomposition of hierarchical project keys.

Project keys follow the ``group:organ:component:branch[:extra...]`` convention. Keys
that do not follow it are still valid; the missing parts are simply empty.
"""

from __future__ import annotations

from .model import KeyParts

KEY_DELIMITER = ":"


def decompose(key: str) -> KeyParts:
    segments = key.split(KEY_DELIMITER)
    padded = [*segments, "", "", "", ""]
    return KeyParts(
        group=padded[0],
        organ=padded[1],
        component=padded[2],
        branch=padded[3],
        optionals=tuple(segments[4:]),
    )


def display_name(key: str, name: str | None) -> str:
    """Human label for a project: its name, else the component segment, else the key."""

    if name and name.strip():
        return name
    return decompose(key).component or key

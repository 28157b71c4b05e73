"""Membership checks over sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["contains"]


def contains(items: Iterable[Any] | None, item: Any) -> bool:
    """Return True if ``item`` occurs in ``items``.

    Elements must have the same type as ``item`` and compare equal to it.
    ``True`` therefore does not match ``1``, and ``1`` does not match ``1.0``.
    """
    if not items:
        return False
    wanted = type(item)
    return any(type(element) is wanted and element == item for element in items)
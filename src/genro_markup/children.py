# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Normalization of child collections before they are attached to an element."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterator

if TYPE_CHECKING:
    from .element import BaseElement


def _is_leaf(value: Any) -> bool:
    """True if value must not be iterated when flattening."""
    from .element import BaseElement

    if isinstance(value, (str, bytes, BaseElement)):
        return True
    return not hasattr(value, '__iter__')


def _flatten(value: Any) -> Iterator[Any]:
    if _is_leaf(value):
        yield value
        return
    for item in value:
        yield from _flatten(item)


def normalize(value: Any) -> list[Any]:
    """Flatten a child, a sequence of children or nested sequences of them.

    Strings and elements are leaves. Anything else that is not iterable is
    kept as a leaf too, so the caller can reject it.

    Example:
        >>> normalize([['a', 'b'], 'c'])
        ['a', 'b', 'c']
        >>> normalize('a')
        ['a']
    """
    return list(_flatten(value))


def map_each(
    items: list[Any], mapper: Callable[[Any], BaseElement | str]
) -> list[Any]:
    """Apply mapper to each item, preserving order."""
    return [mapper(item) for item in items]

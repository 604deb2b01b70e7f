# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attributes - ordered attribute store for markup elements.

The store keeps attribute names in first-insertion order. The ``class``
attribute is special: its value is a list of unique tokens that grows by
union, so adding ``'a'`` then ``'a b'`` yields ``'a b'``.

Example:
    >>> attrs = Attributes()
    >>> attrs.set_attribute('href', '/home')
    >>> attrs.add_class('nav active')
    >>> attrs.render()
    'href="/home" class="nav active"'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape
from typing import Any

CLASS_ATTRIBUTE = 'class'


def escape_text(value: str) -> str:
    """Escape the five markup-significant characters: & < > " '."""
    return escape(value, quote=True)


def _class_tokens(value: str | Iterable[str] | Mapping[str, Any]) -> list[str]:
    """Turn a class specification into a flat list of tokens.

    Accepts a space separated string, an iterable of strings, or a mapping
    of ``{class_name: condition}`` where only truthy entries are kept.
    """
    if isinstance(value, str):
        names: Iterable[str] = [value]
    elif isinstance(value, Mapping):
        names = [name for name, enabled in value.items() if enabled]
    else:
        names = value

    tokens: list[str] = []
    for name in names:
        tokens.extend(name.split())
    return tokens


class Attributes:
    """Ordered ``name -> value`` store rendered as markup attributes."""

    __slots__ = ('_attributes', '_classes')

    def __init__(self, attributes: Mapping[str, str] | None = None) -> None:
        self._attributes: dict[str, str] = {}
        self._classes: list[str] = []
        if attributes:
            self.set_attributes(attributes)

    def __repr__(self) -> str:
        return f"Attributes({self.to_dict()!r})"

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __copy__(self) -> Attributes:
        clone = Attributes.__new__(Attributes)
        clone._attributes = dict(self._attributes)
        clone._classes = list(self._classes)
        return clone

    def copy(self) -> Attributes:
        """Return an independent copy of this store."""
        return self.__copy__()

    def set_attribute(self, name: str, value: Any = '') -> None:
        """Set or overwrite an attribute. ``class`` is merged, not replaced.

        Values are stored as strings; ``None`` becomes an empty value.
        """
        if name == CLASS_ATTRIBUTE:
            if value:
                self.add_class(value)
            return
        self._attributes[name] = '' if value is None else str(value)

    def set_attributes(
        self, attributes: Mapping[str, Any] | Iterable[str | tuple[str, Any]]
    ) -> None:
        """Merge many attributes at once.

        Args:
            attributes: A mapping, an iterable of ``(name, value)`` pairs, or
                bare names. A bare name is stored with an empty value.
        """
        items = attributes.items() if isinstance(attributes, Mapping) else attributes
        for item in items:
            if isinstance(item, str):
                name, value = item, ''
            else:
                name, value = item
            self.set_attribute(name, value)

    def forget_attribute(self, name: str) -> None:
        """Remove an attribute if present."""
        if name == CLASS_ATTRIBUTE:
            self._classes = []
        self._attributes.pop(name, None)

    def get_attribute(self, name: str, fallback: str = '') -> str:
        """Return the attribute value, or ``fallback`` if it is not set."""
        if name not in self._attributes:
            return fallback
        if name == CLASS_ATTRIBUTE:
            return ' '.join(self._classes)
        return self._attributes[name]

    def add_class(self, value: str | Iterable[str] | Mapping[str, Any]) -> None:
        """Union class tokens into the ``class`` attribute.

        Duplicates collapse, and tokens keep the order of first occurrence.
        """
        for token in _class_tokens(value):
            if token not in self._classes:
                self._classes.append(token)
        if self._classes:
            # reserves the position of ``class`` in insertion order
            self._attributes.setdefault(CLASS_ATTRIBUTE, '')

    def is_empty(self) -> bool:
        return not self._attributes

    def to_dict(self) -> dict[str, str]:
        """Return all attributes as a plain dict, in insertion order."""
        return {name: self.get_attribute(name) for name in self._attributes}

    def render(self) -> str:
        """Render as space separated ``name="value"`` tokens.

        Values are escaped. An empty value renders as the bare name.
        """
        tokens = []
        for name, value in self.to_dict().items():
            if value == '':
                tokens.append(name)
            else:
                tokens.append(f'{name}="{escape_text(value)}"')
        return ' '.join(tokens)

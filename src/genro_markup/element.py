# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BaseElement - immutable markup element.

Every method that changes an element returns a new element and leaves the
receiver untouched. The copy owns its own attribute store; the children
tuple is shared until the copy changes it.

Example:
    Building a link::

        from genro_markup import html

        link = html.a().attribute('href', '/home').text('Home')
        link.render()  # '<a href="/home">Home</a>'

    The original value stays usable::

        base = html.div().add_class('card')
        first = base.id('first')
        second = base.id('second')
        base.render()  # '<div class="card"></div>'
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterable, Mapping, TypeVar, Union

from .attributes import Attributes, escape_text
from .children import map_each, normalize
from .exceptions import InvalidChildError, InvalidHtmlError, MissingTagError

# Elements that never have a closing tag or inner content.
VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr',
    'img', 'input', 'keygen', 'link', 'menuitem',
    'meta', 'param', 'source', 'track', 'wbr',
})

_E = TypeVar('_E', bound='BaseElement')

Child = Union['BaseElement', str]


class BaseElement:
    """An immutable markup element with a tag, attributes and children.

    Subclasses fix the tag with a class attribute::

        class Div(BaseElement):
            tag = 'div'

    or the tag is passed directly: ``BaseElement('div')``.

    Attributes:
        tag: The element's tag name.
    """

    tag: str = ''

    def __init__(self, tag: str | None = None) -> None:
        tag = tag or type(self).tag
        if not tag:
            raise MissingTagError(type(self).__name__)

        self.tag = tag
        self._attributes = Attributes()
        self._children: tuple[Child, ...] = ()

    @classmethod
    def create(cls: type[_E], tag: str | None = None) -> _E:
        """Create a new element with no attributes and no children."""
        return cls(tag)

    def __copy__(self: _E) -> _E:
        element = type(self).__new__(type(self))
        element.__dict__.update(self.__dict__)
        element._attributes = self._attributes.copy()
        return element

    def _clone(self: _E) -> _E:
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.tag!r}, "
            f"attributes={len(self._attributes)}, children={len(self._children)})"
        )

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        """Markup protocol used by template engines to skip escaping."""
        return self.render()

    def to_html(self) -> str:
        return self.render()

    @property
    def child_nodes(self) -> tuple[Child, ...]:
        """The element's children, in order."""
        return self._children

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def attribute(self: _E, name: str, value: Any = '') -> _E:
        """Return a copy with ``name`` set to ``value``."""
        element = self._clone()
        element._attributes.set_attribute(name, value)
        return element

    def attribute_if(self: _E, condition: bool, name: str, value: Any = '') -> _E:
        """Like attribute(), but returns self unchanged if condition is false."""
        return self.attribute(name, value) if condition else self

    def attributes(
        self: _E, attributes: Mapping[str, Any] | Iterable[str | tuple[str, Any]]
    ) -> _E:
        """Return a copy with all the given attributes merged in.

        Args:
            attributes: A mapping, ``(name, value)`` pairs, or bare names.
        """
        element = self._clone()
        element._attributes.set_attributes(attributes)
        return element

    def forget_attribute(self: _E, name: str) -> _E:
        element = self._clone()
        element._attributes.forget_attribute(name)
        return element

    def get_attribute(self, name: str, fallback: str = '') -> str:
        return self._attributes.get_attribute(name, fallback)

    def add_class(self: _E, value: str | Iterable[str] | Mapping[str, Any]) -> _E:
        """Return a copy with the given class token(s) added.

        Args:
            value: Space separated string, iterable of strings, or a mapping
                ``{class_name: condition}``.
        """
        element = self._clone()
        element._attributes.add_class(value)
        return element

    def class_(self: _E, value: str | Iterable[str] | Mapping[str, Any]) -> _E:
        """Alias for add_class()."""
        return self.add_class(value)

    def id(self: _E, value: str) -> _E:
        return self.attribute('id', value)

    # -------------------------------------------------------------------------
    # Children
    # -------------------------------------------------------------------------

    def add_children(
        self: _E,
        children: Any,
        mapper: Callable[[Any], Child] | None = None,
    ) -> _E:
        """Return a copy with the given children appended.

        Args:
            children: An element, a string, or (nested) iterables of them.
                ``None`` returns self unchanged.
            mapper: Optional function applied to each flattened child.

        Raises:
            InvalidChildError: If any child, after mapping, is not an element
                or a string. No child of the batch is added.
        """
        if children is None:
            return self

        items = normalize(children)
        if mapper is not None:
            items = map_each(items, mapper)
        for item in items:
            self._guard_against_invalid_child(item)

        element = self._clone()
        element._children = self._children + tuple(items)
        return element

    def children(
        self: _E,
        children: Any,
        mapper: Callable[[Any], Child] | None = None,
    ) -> _E:
        """Alias for add_children()."""
        return self.add_children(children, mapper)

    def add_child(self: _E, child: Child) -> _E:
        self._guard_against_invalid_child(child)

        element = self._clone()
        element._children = self._children + (child,)
        return element

    def prepend_child(self: _E, child: Child) -> _E:
        self._guard_against_invalid_child(child)

        element = self._clone()
        element._children = (child,) + self._children
        return element

    def text(self: _E, value: str) -> _E:
        """Replace the children with the escaped text."""
        return self.html(escape_text(value))

    def html(self: _E, value: str) -> _E:
        """Replace the children with raw, unescaped markup.

        Raises:
            InvalidHtmlError: If this is a void element.
        """
        if self.is_void_element():
            raise InvalidHtmlError(self.tag)

        element = self._clone()
        element._children = (value,)
        return element

    def if_then(self, condition: bool, callback: Callable[[Any], Any]) -> Any:
        """Return ``callback(self)`` if condition is true, else self.

        Elements are immutable, so the callback must return the new element.
        """
        return callback(self) if condition else self

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def open(self) -> str:
        if self._attributes.is_empty():
            return f"<{self.tag}>"
        return f"<{self.tag} {self._attributes.render()}>"

    def render_children(self) -> str:
        parts = []
        for child in self._children:
            if isinstance(child, BaseElement):
                parts.append(child.render())
            elif isinstance(child, str):
                parts.append(child)
            else:
                raise InvalidChildError(child)
        return ''.join(parts)

    def close(self) -> str:
        if self.is_void_element():
            return ''
        return f"</{self.tag}>"

    def render(self) -> str:
        return self.open() + self.render_children() + self.close()

    def is_void_element(self) -> bool:
        return self.tag in VOID_ELEMENTS

    @staticmethod
    def _guard_against_invalid_child(child: Any) -> None:
        if not isinstance(child, (BaseElement, str)):
            raise InvalidChildError(child)

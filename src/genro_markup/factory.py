# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Html - tag factory producing BaseElement instances.

Any attribute of an ``Html`` instance is a factory for the tag with that
name. Keyword arguments become attributes and positional arguments become
children.

Example:
    >>> from genro_markup import html
    >>> html.ul(class_='menu').add_children(
    ...     ['Home', 'About'], lambda label: html.li().text(label)
    ... ).render()
    '<ul class="menu"><li>Home</li><li>About</li></ul>'
    >>> html.input(type='text', required='').render()
    '<input type="text" required>'
"""

from __future__ import annotations

from typing import Any, Callable

from .element import VOID_ELEMENTS, BaseElement


def _attribute_name(name: str) -> str:
    """Map a Python keyword argument to an attribute name.

    ``class_`` becomes ``class`` and ``data_id`` becomes ``data-id``.
    """
    return name.rstrip('_').replace('_', '-')


def element(tag: str, *children: Any, **attributes: Any) -> BaseElement:
    """Create an element for an arbitrary tag.

    Args:
        tag: Tag name.
        *children: Children, as accepted by BaseElement.add_children().
        **attributes: Attributes; see _attribute_name() for name mapping.
    """
    node = BaseElement.create(tag)
    if attributes:
        node = node.attributes(
            {_attribute_name(name): value for name, value in attributes.items()}
        )
    if children:
        node = node.add_children(children)
    return node


class Html:
    """Factory with one method per tag, resolved dynamically.

    A trailing underscore is stripped, so tags that are Python keywords or
    builtins stay reachable (``html.del_()``, ``html.object_()``).

    Usage:
        >>> html = Html()
        >>> html.div(id='main').render()
        '<div id="main"></div>'
        >>> html.br().render()
        '<br>'
    """

    VOID_ELEMENTS = VOID_ELEMENTS

    def __getattr__(self, name: str) -> Callable[..., BaseElement]:
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        tag = name[:-1] if name.endswith('_') else name
        return self._make_tag_method(tag)

    def _make_tag_method(self, tag: str) -> Callable[..., BaseElement]:
        def tag_method(*children: Any, **attributes: Any) -> BaseElement:
            return element(tag, *children, **attributes)

        tag_method.__name__ = tag
        return tag_method

    def element(self, tag: str, *children: Any, **attributes: Any) -> BaseElement:
        """Create an element for a tag that is not a valid identifier."""
        return element(tag, *children, **attributes)


html = Html()

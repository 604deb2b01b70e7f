# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Immutable builder for HTML elements.

A lightweight, zero-dependency library to build markup trees through
non-mutating transformations and render them to strings.
"""

__version__ = "0.1.0"

from .attributes import Attributes, escape_text
from .children import map_each, normalize
from .element import VOID_ELEMENTS, BaseElement
from .exceptions import (
    InvalidChildError,
    InvalidHtmlError,
    MarkupError,
    MissingTagError,
)
from .factory import Html, element, html

__all__ = [
    # Elements
    "BaseElement",
    "VOID_ELEMENTS",
    "Html",
    "html",
    "element",
    # Collaborators
    "Attributes",
    "escape_text",
    "normalize",
    "map_each",
    # Exceptions
    "MarkupError",
    "MissingTagError",
    "InvalidChildError",
    "InvalidHtmlError",
]

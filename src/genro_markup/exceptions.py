# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup builder exceptions."""

from __future__ import annotations

from typing import Any


class MarkupError(Exception):
    """Base exception for markup builder errors."""

    pass


class MissingTagError(MarkupError):
    """Raised when an element class has no tag configured."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f"Class `{class_name}` has no `tag` configured")


class InvalidChildError(MarkupError):
    """Raised when a child is neither an element nor a string."""

    def __init__(self, child: Any) -> None:
        self.child = child
        super().__init__(
            f"Children must be elements or strings, got "
            f"`{type(child).__name__}`: {child!r}"
        )


class InvalidHtmlError(MarkupError):
    """Raised when inner html is set on a void element."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(
            f"Can't set inner contents on `{tag}` because it's a void element"
        )

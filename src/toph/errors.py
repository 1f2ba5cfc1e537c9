"""Exceptions raised for programmer errors while building node trees.

Untrusted input never raises: attributes that fail the safety policy are
dropped silently. These exceptions only signal misuse of the builder API
itself, such as an impossible tag name.
"""

from __future__ import annotations


class TophError(Exception):
    """Base class for all toph errors."""


class InvalidNameError(TophError, ValueError):
    """A tag or CSS variable name that cannot be emitted safely."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"Invalid {kind} name: {name!r}")


class InvalidChildError(TophError, TypeError):
    """A value passed as a child that cannot be converted to a node."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Cannot use {type(value).__name__} as a child node")

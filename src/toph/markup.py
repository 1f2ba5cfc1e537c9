"""Trusted string marker.

A `Static` string is one the author of the program wrote down, as opposed to
one computed at runtime from data that may be attacker controlled. Static
values skip the attribute allow-list and URL filtering, and static text is
inserted without escaping.

Both `static()` and the `Static` constructor take a `LiteralString` (PEP
675): a type checker rejects any argument that is not built purely from
string literals. Every `str` method on a `Static` returns a plain `str`, so
concatenating or formatting a static value with runtime data produces an
untrusted string again.
"""

from __future__ import annotations

from typing_extensions import LiteralString


class Static(str):
    """A `str` known to originate from a literal in the program source."""

    __slots__ = ()

    def __new__(cls, value: LiteralString) -> Static:
        return str.__new__(cls, value)

    def __repr__(self) -> str:
        return f"static({str.__repr__(self)})"


def static(value: LiteralString) -> Static:
    """Mark a literal string as trusted."""
    if isinstance(value, Static):
        return value
    return Static(value)


def _trust(value: str) -> Static:
    # For library-generated text only: formatted numbers and asset snippets
    # whose constructors already demanded a literal.
    return str.__new__(Static, value)

"""CSS and JavaScript snippets attached to elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from typing_extensions import LiteralString

AssetKind = Literal["css", "js"]


@dataclass(frozen=True, slots=True)
class Asset:
    """A stylesheet or script snippet that belongs to an element.

    The text is emitted verbatim inside <style>/<script>, so it must come
    from the program source and never from runtime data. The constructors
    are typed `LiteralString` for type checkers to enforce this; at runtime
    it is the caller's responsibility.
    """

    kind: AssetKind
    text: str

    @classmethod
    def css(cls, text: LiteralString) -> Asset:
        return cls("css", text)

    @classmethod
    def js(cls, text: LiteralString) -> Asset:
        return cls("js", text)

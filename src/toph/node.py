"""Node tree: elements, text and fragments.

Builder methods mutate the receiver and return it, so calls chain:

    div_().with_(class_="card").set(h2_("Title"), p_(body)).stylesheet(CARD_CSS)

A tree owns its subtrees exclusively; use `clone()` before inserting the same
subtree in two places.
"""

from __future__ import annotations

import abc
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from typing_extensions import LiteralString, Self, TypeAlias

from .asset import Asset
from .attribute import Attribute, AttributeMap, AttrValue, VariableMap
from .constants import DOCTYPE, VOID_ELEMENTS
from .encode import encode_html
from .errors import InvalidChildError, InvalidNameError
from .markup import Static
from .policy import DEFAULT_POLICY, AttributePolicy

logger = logging.getLogger(__name__)

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9_.:-]*")

# Anything `set()` accepts: nodes, strings, numbers, None, exceptions and (nested) iterables of those
Child: TypeAlias = Union["Node", str, int, float, None, BaseException, Iterable[Any]]


class Node(abc.ABC):
    """Base class of the node variants.

    The builder methods are no-ops here; only `Element` carries attributes,
    assets and children.
    """

    __slots__ = ()

    def with_(self, *attributes: Attribute | Mapping[str, AttrValue] | str, **kwargs: AttrValue) -> Self:
        return self

    def stylesheet(self, text: LiteralString) -> Self:
        return self

    def css(self, text: LiteralString) -> Self:
        """Alias of `stylesheet`."""
        return self.stylesheet(text)

    def js(self, text: LiteralString) -> Self:
        return self

    def var(self, name: str, value: str | int | float) -> Self:
        return self

    def set(self, *children: Child) -> Self:
        return self

    @abc.abstractmethod
    def _shallow_copy(self) -> Self:
        """Copy this node without its children."""

    def clone(self) -> Self:
        """Return an independent deep copy of this tree."""
        root = self._shallow_copy()
        stack: list[tuple[Node, Node]] = [(self, root)]
        while stack:
            source, target = stack.pop()
            if isinstance(source, Element) and isinstance(target, Element):
                if source.child is not None:
                    target.child = source.child._shallow_copy()
                    stack.append((source.child, target.child))
            elif isinstance(source, Fragment) and isinstance(target, Fragment):
                target.children = [child._shallow_copy() for child in source.children]
                stack.extend(zip(source.children, target.children))
        return root

    def to_html(self, *, pretty: bool = False) -> str:
        from .serialize import render, render_pretty

        return render_pretty(self) if pretty else render(self)

    def __str__(self) -> str:
        return self.to_html()


class Element(Node):
    """An HTML element with attributes, CSS variables, assets and one child subtree."""

    __slots__ = ("_tag", "assets", "attributes", "child", "variables")

    def __init__(self, tag: str, *, policy: AttributePolicy = DEFAULT_POLICY) -> None:
        if tag != DOCTYPE and not _TAG_NAME.fullmatch(tag):
            raise InvalidNameError("tag", tag)
        self._tag = tag
        self.attributes = AttributeMap(policy)
        self.variables = VariableMap()
        self.assets: list[Asset] = []
        self.child: Node | None = None

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def is_void(self) -> bool:
        return self._tag in VOID_ELEMENTS

    def with_(self, *attributes: Attribute | Mapping[str, AttrValue] | str, **kwargs: AttrValue) -> Self:
        """Merge attributes into this element.

        Positional items are `Attribute` objects, mappings of key to value, or
        names of boolean attributes (an empty name is ignored, which allows
        `"async" if deferred else ""`). Keyword arguments map key to value;
        a trailing underscore is dropped and inner underscores become
        hyphens, so `class_="x", data_id="1"` gives `class="x" data-id="1"`.
        A value of None means "no attribute".
        """
        for item in attributes:
            if isinstance(item, Attribute):
                self.attributes.insert(item)
            elif isinstance(item, str):
                self.attributes.insert(Attribute(item, True))
            elif isinstance(item, Mapping):
                self._insert_items(item.items())
            else:
                msg = f"Cannot use {type(item).__name__} as an attribute"
                raise TypeError(msg)
        self._insert_items(kwargs.items())
        return self

    def _insert_items(self, items: Iterable[tuple[str, AttrValue]]) -> None:
        for key, value in items:
            if value is None:
                continue
            self.attributes.insert(Attribute(key, value))

    def stylesheet(self, text: LiteralString) -> Self:
        if text:
            self.assets.append(Asset.css(text))
        return self

    def js(self, text: LiteralString) -> Self:
        if text:
            self.assets.append(Asset.js(text))
        return self

    def var(self, name: str, value: str | int | float) -> Self:
        self.variables.insert(name, value)
        return self

    def set(self, *children: Child) -> Self:
        """Append children.

        Repeated calls accumulate. Several children are grouped in a
        `Fragment`; nothing happens when `children` contains no nodes.
        """
        nodes = list(iter_nodes(children))
        if not nodes:
            return self
        if any(node is self for node in nodes):
            msg = f"Adding <{self._tag}> as its own child would create a circular reference"
            raise ValueError(msg)

        child = self.child
        if child is None:
            self.child = nodes[0] if len(nodes) == 1 else Fragment(nodes)
        elif isinstance(child, Fragment):
            child.children.extend(nodes)
        else:
            self.child = Fragment([child, *nodes])
        return self

    def _shallow_copy(self) -> Self:
        other = type(self).__new__(type(self))
        other._tag = self._tag
        other.attributes = self.attributes.copy()
        other.variables = self.variables.copy()
        other.assets = list(self.assets)
        other.child = None
        return other

    def __repr__(self) -> str:
        return f"Element({self._tag!r}{self.attributes.to_html(self.variables)})"


class Text(Node):
    """A text node.

    `Static` strings are stored verbatim and marked trusted. Any other string
    is HTML-escaped here, once, so serialization emits `text` as is.
    """

    __slots__ = ("text", "trusted")

    def __init__(self, value: str) -> None:
        if isinstance(value, Static):
            self.text = str(value)
            self.trusted = True
        else:
            self.text = encode_html(value)
            self.trusted = False

    def _shallow_copy(self) -> Self:
        other = type(self).__new__(type(self))
        other.text = self.text
        other.trusted = self.trusted
        return other

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class Fragment(Node):
    """An ordered group of nodes with no markup of its own."""

    __slots__ = ("children",)

    def __init__(self, children: Iterable[Child] = ()) -> None:
        self.children: list[Node] = list(iter_nodes(children))

    def _shallow_copy(self) -> Self:
        other = type(self).__new__(type(self))
        other.children = []
        return other

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Fragment({self.children!r})"


def iter_nodes(value: Child) -> Iterator[Node]:
    """Flatten `value` into nodes, converting strings and numbers to `Text`.

    None and exception instances (a failed result) contribute nothing.
    """
    stack: list[Iterator[Any]] = [iter((value,))]
    while stack:
        for item in stack[-1]:
            if item is None:
                continue
            if isinstance(item, Node):
                yield item
            elif isinstance(item, str):
                yield Text(item)
            elif isinstance(item, BaseException):
                logger.debug("Skipping failed child %r", item)
            elif isinstance(item, (int, float)) and not isinstance(item, bool):
                yield Text(str(item))
            elif isinstance(item, Iterable) and not isinstance(item, (bytes, bytearray, Mapping)):
                stack.append(iter(item))
                break
            else:
                raise InvalidChildError(item)
        else:
            stack.pop()


def text(value: str | int | float) -> Text:
    """Build a text node; plain strings are escaped, `Static` strings are not."""
    if isinstance(value, str):
        return Text(value)
    return Text(str(value))


def unsafe_raw_html(markup: str) -> Text:
    """Insert `markup` without any escaping.

    The caller is responsible for the markup being safe. Never pass data
    that may contain user input.
    """
    node = Text.__new__(Text)
    node.text = markup
    node.trusted = True
    return node

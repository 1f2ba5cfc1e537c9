"""HTML serialization for toph node trees."""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import IO, Any

from .hoist import include_assets
from .node import Child, Element, Fragment, Node, Text
from .visitor import NodeVisitor, visit_nodes


class HtmlWriter(NodeVisitor[None]):
    """Visitor that writes HTML chunks to a `write` callable.

    In compact mode nothing but the markup and text content is written. In
    pretty mode every tag and text node gets its own line, indented by
    `indent_size` spaces per level; newlines inside text are re-indented to
    the current level.
    """

    def __init__(self, write: Callable[[str], Any], *, pretty: bool = False, indent_size: int = 2) -> None:
        self._write = write
        self.pretty = pretty
        self.indent_size = indent_size
        self.depth = 0

    def _indent(self) -> str:
        return " " * (self.depth * self.indent_size) if self.pretty else ""

    def visit_open_tag(self, element: Element) -> None:
        attrs = element.attributes.to_html(element.variables)
        if self.pretty:
            self._write(f"{self._indent()}<{element.tag}{attrs}>\n")
            if not element.is_void:
                self.depth += 1
        else:
            self._write(f"<{element.tag}{attrs}>")

    def visit_close_tag(self, tag: str) -> None:
        if self.pretty:
            self.depth -= 1
            self._write(f"{self._indent()}</{tag}>\n")
        else:
            self._write(f"</{tag}>")

    def visit_text(self, text: Text) -> None:
        if not self.pretty:
            self._write(text.text)
            return
        content = text.text.rstrip()
        if not content:
            return
        indent = self._indent()
        self._write(f"{indent}{content.replace(chr(10), chr(10) + indent)}\n")


def _prepare(nodes: tuple[Child, ...]) -> Fragment:
    """Collect the top-level nodes and hoist assets of every top-level <html> element."""
    root = Fragment(nodes)
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Fragment):
            stack.extend(node.children)
        elif isinstance(node, Element) and node.tag == "html":
            include_assets(node)
    return root


def render(*nodes: Child) -> str:
    """Serialize `nodes` to compact HTML.

    Top-level <html> elements first get their assets hoisted into <head>
    and <body>.
    """
    parts: list[str] = []
    visit_nodes(_prepare(nodes), HtmlWriter(parts.append))
    return "".join(parts)


def render_pretty(*nodes: Child, indent_size: int = 2) -> str:
    """Serialize `nodes` to indented HTML, one tag or text node per line."""
    parts: list[str] = []
    visit_nodes(_prepare(nodes), HtmlWriter(parts.append, pretty=True, indent_size=indent_size))
    return "".join(parts)


def write_html(
    sink: IO[str] | IO[bytes],
    *nodes: Child,
    pretty: bool = False,
    encoding: str = "utf-8",
) -> None:
    """Stream the serialization of `nodes` to `sink`.

    Binary sinks (`io.RawIOBase`/`io.BufferedIOBase`) receive `encoding`
    encoded bytes, anything else is written `str` chunks. The sink is flushed
    at the end. Short writes to raw sinks are retried until every byte is
    written. Errors raised by the sink propagate to the caller.
    """
    if isinstance(sink, io.RawIOBase):
        raw = sink

        def write(chunk: str) -> None:
            # Raw streams may accept fewer bytes than offered
            data = memoryview(chunk.encode(encoding))
            while data:
                written = raw.write(data)
                if written is None:
                    raise BlockingIOError("sink is not ready for writing")
                data = data[written:]

    elif isinstance(sink, io.BufferedIOBase):
        buffered = sink

        def write(chunk: str) -> None:
            buffered.write(chunk.encode(encoding))

    else:
        write = sink.write  # type: ignore[assignment]

    visit_nodes(_prepare(nodes), HtmlWriter(write, pretty=pretty))
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()


"""Iterative depth-first traversal of node trees.

Nodes are visited in the order they appear in the HTML output. Element
nodes are visited twice, for the start and the end tag; text nodes once.
Fragments are skipped but their children are visited.

The walk uses an explicit work-list instead of recursion, so tree depth is
not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from .node import Element, Fragment, Node, Text

T = TypeVar("T")


class NodeVisitor(Generic[T]):
    """Callbacks invoked by `visit_nodes`. All default to doing nothing.

    `visit_open_tag` receives the element itself and may modify its child;
    the walk reads `element.child` only after the callback returns.
    """

    def visit_open_tag(self, element: Element) -> None:
        pass

    def visit_close_tag(self, tag: str) -> None:
        pass

    def visit_text(self, text: Text) -> None:
        pass

    def finish(self) -> T | None:
        return None


# Work-list entries: ("open", node) or ("close", tag name)
_OPEN = 0
_CLOSE = 1


def visit_nodes(root: Node, visitor: NodeVisitor[T]) -> T | None:
    """Walk `root` and return whatever `visitor.finish()` returns."""
    stack: list[tuple[int, Node | str]] = [(_OPEN, root)]

    while stack:
        action, item = stack.pop()
        if action == _CLOSE:
            visitor.visit_close_tag(item)  # type: ignore[arg-type]
            continue

        if isinstance(item, Element):
            visitor.visit_open_tag(item)
            if item.is_void:
                continue
            # Re-visit this element after its children have been visited
            stack.append((_CLOSE, item.tag))
            if item.child is not None:
                stack.append((_OPEN, item.child))
        elif isinstance(item, Fragment):
            stack.extend((_OPEN, child) for child in reversed(item.children))
        elif isinstance(item, Text):
            visitor.visit_text(item)

    return visitor.finish()

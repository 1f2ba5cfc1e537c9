"""Asset hoisting: move element CSS/JS into the document <head>/<body>.

Elements anywhere in a document may carry stylesheet and script snippets.
Before an <html> tree is serialized, every snippet is collected, identical
snippets are merged, and the result is placed where the browser expects it:
one <style> per unique stylesheet at the start of the first <head>, one
<script> per unique script at the end of the first <body>.
"""

from __future__ import annotations

import logging

from .markup import _trust
from .node import Element, Fragment, Node, Text
from .visitor import NodeVisitor, visit_nodes

logger = logging.getLogger(__name__)


class AssetCollector(NodeVisitor[None]):
    """Collects (and removes) assets from every element, in first-seen order."""

    def __init__(self) -> None:
        # dicts as insertion-ordered sets
        self.css: dict[str, None] = {}
        self.js: dict[str, None] = {}

    def visit_open_tag(self, element: Element) -> None:
        if not element.assets:
            return
        for asset in element.assets:
            if asset.kind == "css":
                self.css.setdefault(asset.text)
            else:
                self.js.setdefault(asset.text)
        element.assets.clear()


class AssetInserter(NodeVisitor[None]):
    """Prepends `style` to the first <head> and appends `script` to the first <body>."""

    def __init__(self, style: Fragment | None, script: Fragment | None) -> None:
        self.style = style
        self.script = script

    def visit_open_tag(self, element: Element) -> None:
        if element.tag == "head" and self.style is not None:
            node, self.style = self.style, None
            element.child = node if element.child is None else Fragment([node, element.child])
        elif element.tag == "body" and self.script is not None:
            node, self.script = self.script, None
            element.child = node if element.child is None else Fragment([element.child, node])

    def finish(self) -> None:
        if self.style is not None:
            logger.debug("No <head> element; dropping %d stylesheet(s)", len(self.style))
        if self.script is not None:
            logger.debug("No <body> element; dropping %d script(s)", len(self.script))


def _wrap(tag: str, snippets: dict[str, None]) -> Fragment | None:
    if not snippets:
        return None
    return Fragment(Element(tag).set(Text(_trust(snippet))) for snippet in snippets)


def include_assets(root: Node) -> None:
    """Hoist all assets under `root` into its <head> and <body>.

    Assets are drained from their elements, so running this twice on the
    same tree does not duplicate them. Assets are dropped when the matching
    <head> or <body> element does not exist.
    """
    collector = AssetCollector()
    visit_nodes(root, collector)

    style = _wrap("style", collector.css)
    script = _wrap("script", collector.js)
    if style is None and script is None:
        return

    visit_nodes(root, AssetInserter(style, script))

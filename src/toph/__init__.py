from .asset import Asset
from .attribute import Attribute, AttributeMap, VariableMap
from .encode import encode_attr, encode_html, encode_url
from .errors import InvalidChildError, InvalidNameError, TophError
from .hoist import include_assets
from .markup import static
from .node import Element, Fragment, Node, Text, text, unsafe_raw_html
from .policy import DEFAULT_POLICY, DEFAULT_URL_RULE, AttributePolicy, UrlRule
from .serialize import HtmlWriter, render, render_pretty, write_html
from .tags import TAGS, custom_, doctype_
from .visitor import NodeVisitor, visit_nodes

__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_URL_RULE",
    "TAGS",
    "Asset",
    "Attribute",
    "AttributeMap",
    "AttributePolicy",
    "Element",
    "Fragment",
    "HtmlWriter",
    "InvalidChildError",
    "InvalidNameError",
    "Node",
    "NodeVisitor",
    "Text",
    "TophError",
    "UrlRule",
    "VariableMap",
    "custom_",
    "doctype_",
    "encode_attr",
    "encode_html",
    "encode_url",
    "include_assets",
    "render",
    "render_pretty",
    "static",
    "text",
    "unsafe_raw_html",
    "visit_nodes",
    "write_html",
]

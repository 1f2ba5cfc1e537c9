"""HTML Element and Attribute Constants

Tag names are kept in lists to give the tag registry a stable order;
membership tests go through the frozenset variants.

Usage:
    from toph.constants import VOID_ELEMENTS, SPACE_SEPARATED_ATTRIBUTES

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/indices.html#attributes-3
    - https://cheatsheetseries.owasp.org/cheatsheets/Cross_Site_Scripting_Prevention_Cheat_Sheet.html
"""

# Pseudo-element rendered as "<!DOCTYPE html>"
DOCTYPE = "!DOCTYPE"

# HTML Element Sets
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
        DOCTYPE,
    }
)

# Every tag with a dedicated factory in toph.tags, grouped as on MDN
HTML_ELEMENTS = [
    # main root
    "html",
    # document metadata
    "base",
    "head",
    "link",
    "meta",
    "style",
    "title",
    # sectioning root
    "body",
    # content sectioning
    "address",
    "article",
    "aside",
    "footer",
    "header",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hgroup",
    "main",
    "nav",
    "search",
    "section",
    # text content
    "blockquote",
    "dd",
    "div",
    "dl",
    "dt",
    "figcaption",
    "figure",
    "hr",
    "li",
    "menu",
    "ol",
    "p",
    "pre",
    "ul",
    # inline text semantics
    "a",
    "abbr",
    "b",
    "bdi",
    "bdo",
    "br",
    "cite",
    "code",
    "data",
    "dfn",
    "em",
    "i",
    "kbd",
    "mark",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "time",
    "u",
    "var",
    "wbr",
    # image and multimedia
    "area",
    "audio",
    "img",
    "map",
    "track",
    "video",
    # embedded content
    "embed",
    "iframe",
    "object",
    "picture",
    "source",
    # svg and mathml
    "svg",
    "math",
    # scripting
    "canvas",
    "noscript",
    "script",
    # demarcating edits
    "del",
    "ins",
    # table content
    "caption",
    "col",
    "colgroup",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    # forms
    "button",
    "datalist",
    "fieldset",
    "form",
    "input",
    "label",
    "legend",
    "meter",
    "optgroup",
    "option",
    "output",
    "progress",
    "select",
    "textarea",
    # interactive elements
    "details",
    "dialog",
    "summary",
    # web components
    "slot",
    "template",
]

# Attributes whose values are space separated token lists; repeated values are appended
SPACE_SEPARATED_ATTRIBUTES = frozenset(
    {
        "accesskey",
        "blocking",
        "class",
        "for",
        "headers",
        "itemprop",
        "itemref",
        "itemtype",
        "ping",
        "rel",
        "sandbox",
        "sizes",
    }
)

# Attributes whose values are comma separated lists
COMMA_SEPARATED_ATTRIBUTES = frozenset({"accept", "imagesrcset"})

# Attributes holding a URL; dynamic values go through encode_url
URL_ATTRIBUTES = frozenset(
    {
        "action",
        "cite",
        "data",
        "formaction",
        "href",
        "poster",
        "src",
    }
)

# Attributes that accept dynamic values without special handling (OWASP "safe sinks").
# Event handlers (on*), style and srcdoc are deliberately absent.
SAFE_ATTRIBUTES = frozenset(
    {
        "abbr",
        "accept",
        "accesskey",
        "align",
        "alink",
        "alt",
        "autocomplete",
        "bgcolor",
        "border",
        "cellpadding",
        "cellspacing",
        "charset",
        "class",
        "color",
        "cols",
        "colspan",
        "content",
        "coords",
        "datetime",
        "dir",
        "download",
        "enterkeyhint",
        "face",
        "for",
        "headers",
        "height",
        "high",
        "hreflang",
        "hspace",
        "id",
        "inputmode",
        "itemprop",
        "label",
        "lang",
        "list",
        "low",
        "marginheight",
        "marginwidth",
        "max",
        "maxlength",
        "media",
        "min",
        "minlength",
        "name",
        "optimum",
        "pattern",
        "placeholder",
        "rel",
        "rev",
        "role",
        "rows",
        "rowspan",
        "scope",
        "scrolling",
        "shape",
        "size",
        "sizes",
        "span",
        "start",
        "step",
        "summary",
        "tabindex",
        "title",
        "translate",
        "type",
        "usemap",
        "valign",
        "value",
        "vlink",
        "vspace",
        "width",
        "wrap",
    }
)

# Prefixes of custom attributes that accept dynamic values
SAFE_ATTRIBUTE_PREFIXES = ("data-",)

# Schemes allowed in dynamic URL attribute values
DEFAULT_URL_SCHEMES = frozenset({"http", "https", "mailto", "tel"})

"""Tag factories.

One function per HTML element, named after the tag with a trailing
underscore (so `del_`, `var_` and `object_` don't clash with Python names).
Each call returns a new, independent `Element`:

    from toph.tags import *

    page = html_(
        head_(title_("Hello")),
        body_(h1_("Hello"), p_(greeting, class_="lead")),
    )

Positional arguments become children (see `Element.set`), keyword arguments
become attributes (see `Element.with_`).
"""

from __future__ import annotations

from typing import Protocol

from .attribute import AttrValue
from .constants import DOCTYPE, HTML_ELEMENTS
from .node import Child, Element
from .policy import DEFAULT_POLICY, AttributePolicy


class TagFactory(Protocol):
    def __call__(self, *children: Child, **attributes: AttrValue) -> Element: ...


def _tag(name: str) -> TagFactory:
    def factory(*children: Child, **attributes: AttrValue) -> Element:
        return Element(name).with_(**attributes).set(*children)

    factory.__name__ = factory.__qualname__ = f"{name}_"
    factory.__doc__ = f"Return a new <{name}> element."
    return factory


# Registry of every known tag name to its factory
TAGS: dict[str, TagFactory] = {name: _tag(name) for name in HTML_ELEMENTS}


def custom_(
    tag_name: str,
    *children: Child,
    policy: AttributePolicy = DEFAULT_POLICY,
    **attributes: AttrValue,
) -> Element:
    """Return an element with an arbitrary tag name, e.g. a custom element.

    Raises InvalidNameError if `tag_name` is not a valid tag name.
    """
    return Element(tag_name, policy=policy).with_(**attributes).set(*children)


def doctype_() -> Element:
    """Return the `<!DOCTYPE html>` marker."""
    return Element(DOCTYPE).with_("html")


# main root
html_       = TAGS["html"]
# document metadata
base_       = TAGS["base"]
head_       = TAGS["head"]
link_       = TAGS["link"]
meta_       = TAGS["meta"]
style_      = TAGS["style"]
title_      = TAGS["title"]
# sectioning root
body_       = TAGS["body"]
# content sectioning
address_    = TAGS["address"]
article_    = TAGS["article"]
aside_      = TAGS["aside"]
footer_     = TAGS["footer"]
header_     = TAGS["header"]
h1_         = TAGS["h1"]
h2_         = TAGS["h2"]
h3_         = TAGS["h3"]
h4_         = TAGS["h4"]
h5_         = TAGS["h5"]
h6_         = TAGS["h6"]
hgroup_     = TAGS["hgroup"]
main_       = TAGS["main"]
nav_        = TAGS["nav"]
search_     = TAGS["search"]
section_    = TAGS["section"]
# text content
blockquote_ = TAGS["blockquote"]
dd_         = TAGS["dd"]
div_        = TAGS["div"]
dl_         = TAGS["dl"]
dt_         = TAGS["dt"]
figcaption_ = TAGS["figcaption"]
figure_     = TAGS["figure"]
hr_         = TAGS["hr"]
li_         = TAGS["li"]
menu_       = TAGS["menu"]
ol_         = TAGS["ol"]
p_          = TAGS["p"]
pre_        = TAGS["pre"]
ul_         = TAGS["ul"]
# inline text semantics
a_          = TAGS["a"]
abbr_       = TAGS["abbr"]
b_          = TAGS["b"]
bdi_        = TAGS["bdi"]
bdo_        = TAGS["bdo"]
br_         = TAGS["br"]
cite_       = TAGS["cite"]
code_       = TAGS["code"]
data_       = TAGS["data"]
dfn_        = TAGS["dfn"]
em_         = TAGS["em"]
i_          = TAGS["i"]
kbd_        = TAGS["kbd"]
mark_       = TAGS["mark"]
q_          = TAGS["q"]
rp_         = TAGS["rp"]
rt_         = TAGS["rt"]
ruby_       = TAGS["ruby"]
s_          = TAGS["s"]
samp_       = TAGS["samp"]
small_      = TAGS["small"]
span_       = TAGS["span"]
strong_     = TAGS["strong"]
sub_        = TAGS["sub"]
sup_        = TAGS["sup"]
time_       = TAGS["time"]
u_          = TAGS["u"]
var_        = TAGS["var"]
wbr_        = TAGS["wbr"]
# image and multimedia
area_       = TAGS["area"]
audio_      = TAGS["audio"]
img_        = TAGS["img"]
map_        = TAGS["map"]
track_      = TAGS["track"]
video_      = TAGS["video"]
# embedded content
embed_      = TAGS["embed"]
iframe_     = TAGS["iframe"]
object_     = TAGS["object"]
picture_    = TAGS["picture"]
source_     = TAGS["source"]
# svg and mathml
svg_        = TAGS["svg"]
math_       = TAGS["math"]
# scripting
canvas_     = TAGS["canvas"]
noscript_   = TAGS["noscript"]
script_     = TAGS["script"]
# demarcating edits
del_        = TAGS["del"]
ins_        = TAGS["ins"]
# table content
caption_    = TAGS["caption"]
col_        = TAGS["col"]
colgroup_   = TAGS["colgroup"]
table_      = TAGS["table"]
tbody_      = TAGS["tbody"]
td_         = TAGS["td"]
tfoot_      = TAGS["tfoot"]
th_         = TAGS["th"]
thead_      = TAGS["thead"]
tr_         = TAGS["tr"]
# forms
button_     = TAGS["button"]
datalist_   = TAGS["datalist"]
fieldset_   = TAGS["fieldset"]
form_       = TAGS["form"]
input_      = TAGS["input"]
label_      = TAGS["label"]
legend_     = TAGS["legend"]
meter_      = TAGS["meter"]
optgroup_   = TAGS["optgroup"]
option_     = TAGS["option"]
output_     = TAGS["output"]
progress_   = TAGS["progress"]
select_     = TAGS["select"]
textarea_   = TAGS["textarea"]
# interactive elements
details_    = TAGS["details"]
dialog_     = TAGS["dialog"]
summary_    = TAGS["summary"]
# web components
slot_       = TAGS["slot"]
template_   = TAGS["template"]

__all__ = ["TAGS", "custom_", "doctype_", *(f"{name}_" for name in HTML_ELEMENTS)]

from __future__ import annotations

import unittest

from toph import tags
from toph.constants import HTML_ELEMENTS
from toph.errors import InvalidNameError
from toph.markup import static
from toph.serialize import render
from toph.tags import TAGS, a_, custom_, div_, doctype_, img_, input_, p_, span_


class TestTagFactories(unittest.TestCase):
    def test_every_element_has_a_factory(self) -> None:
        assert set(TAGS) == set(HTML_ELEMENTS)
        for name in HTML_ELEMENTS:
            factory = getattr(tags, f"{name}_")
            assert factory is TAGS[name]
            assert factory.__name__ == f"{name}_"
            assert f"{name}_" in tags.__all__
            assert factory().tag == name

    def test_calls_return_independent_elements(self) -> None:
        first, second = div_(), div_()
        first.with_(id="a")
        assert first is not second
        assert render(second) == "<div></div>"

    def test_children_and_attributes(self) -> None:
        assert render(p_("Hello ", span_("world"), class_="lead")) == '<p class="lead">Hello <span>world</span></p>'

    def test_keyword_underscores(self) -> None:
        element = span_(data_hello="hi").with_("something_something")
        assert render(element) == '<span data-hello="hi" something-something></span>'

    def test_attribute_order(self) -> None:
        element = span_().with_("async", class_="hidden").with_("checked")
        assert render(element) == '<span class="hidden" async checked></span>'

    def test_void_elements(self) -> None:
        assert render(img_(span_("x"), src=static("a.png"))) == '<img src="a.png">'
        assert render(input_(type="checkbox", checked=True, disabled=False)) == '<input type="checkbox" checked>'

    def test_doctype(self) -> None:
        assert render(doctype_()) == "<!DOCTYPE html>"

    def test_custom_element(self) -> None:
        assert render(custom_("my-widget", "x", data_id=5)) == '<my-widget data-id="5">x</my-widget>'
        with self.assertRaises(InvalidNameError):
            custom_("bad name")


class TestInjection(unittest.TestCase):
    def test_text_is_escaped(self) -> None:
        html = render(span_("<script>alert(1)</script>"))
        assert html == "<span>&lt;script&gt;alert(1)&lt;/script&gt;</span>"

    def test_attribute_breakout_is_escaped(self) -> None:
        html = render(span_().with_(class_='"x" onclick="y"'))
        assert html == '<span class="&quot;x&quot; onclick=&quot;y&quot;"></span>'

    def test_dynamic_javascript_url_is_dropped(self) -> None:
        assert render(a_().with_(href="javascript:alert(1)")) == "<a></a>"
        assert render(a_("x", href="/docs?q=a b")) == '<a href="/docs?q=a%20b">x</a>'

    def test_dynamic_event_handler_is_dropped(self) -> None:
        assert render(div_(onclick="steal()")) == "<div></div>"
        assert render(div_(onclick=static("toggle()"))) == '<div onclick="toggle()"></div>'

    def test_dynamic_style_is_dropped(self) -> None:
        assert render(div_(style="background: url(x)")) == "<div></div>"

    def test_css_variable_values_cannot_break_out(self) -> None:
        html = render(div_().var("gap", '1rem" onclick="x'))
        assert html == '<div style="--gap: 1rem&quot; onclick=&quot;x"></div>'

    def test_css_variable(self) -> None:
        assert render(div_().var("gap", "1rem")) == '<div style="--gap: 1rem"></div>'

    def test_attribute_keys_are_case_insensitive(self) -> None:
        element = div_().with_(**{"CLASS": "a"}).with_(class_="b", ID="x")
        assert render(element) == '<div class="a b" id="x"></div>'

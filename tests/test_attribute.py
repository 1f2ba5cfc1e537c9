from __future__ import annotations

import unittest

from toph.attribute import Attribute, AttributeMap, VariableMap, normalize_key
from toph.errors import InvalidNameError
from toph.markup import Static, static
from toph.policy import AttributePolicy


class TestAttribute(unittest.TestCase):
    def test_keys_are_normalized_once(self) -> None:
        assert Attribute("class_", "x").key == "class"
        assert Attribute("for_", "x").key == "for"
        assert Attribute("data_custom_id", "x").key == "data-custom-id"
        assert Attribute("  _for_ ", "x").key == "for"
        assert normalize_key("data-id") == "data-id"
        assert normalize_key("DATA_Id") == "data-id"

    def test_boolean_and_static_classification(self) -> None:
        assert Attribute("async").is_boolean
        assert Attribute("async").is_static
        assert Attribute("title", static("x")).is_static
        assert not Attribute("title", "x").is_static
        assert not Attribute("title", "x").is_boolean

    def test_numbers_become_static_text(self) -> None:
        attr = Attribute("width", 100)
        assert attr.value == "100"
        assert isinstance(attr.value, Static)
        assert Attribute("step", 0.5).value == "0.5"


class TestAttributeMapMerging(unittest.TestCase):
    def test_keys_differing_in_case_are_one_attribute(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("CLASS", "a"))
        attrs.insert(Attribute("class", "b"))
        attrs.insert(Attribute("Hidden"))
        attrs.insert(Attribute("hidden"))
        assert attrs.to_html() == ' class="a b" hidden'

    def test_space_separated_values_accumulate(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("for", "form1"))
        attrs.insert(Attribute("for", "form2"))
        attrs.insert(Attribute("for", "form3"))
        assert attrs.get("for") == "form1 form2 form3"

    def test_comma_separated_values_accumulate(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("accept", "video/*"))
        attrs.insert(Attribute("accept", "audio/*"))
        assert attrs.get("accept") == "video/*,audio/*"

    def test_other_values_are_overwritten(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("id", "id1"))
        attrs.insert(Attribute("id", "id2"))
        attrs.insert(Attribute("id", "id3"))
        assert attrs.get("id") == "id3"

    def test_static_and_dynamic_values_merge(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("class", static("card")))
        attrs.insert(Attribute("class", "highlighted"))
        assert attrs.get("class") == "card highlighted"

    def test_empty_values_do_not_leave_stray_separators(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("class", ""))
        attrs.insert(Attribute("class", "a"))
        attrs.insert(Attribute("class", ""))
        assert attrs.get("class") == "a"

    def test_boolean_attributes_are_a_set(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("hidden", False))
        assert attrs.to_html() == ""
        attrs.insert(Attribute("hidden", True))
        attrs.insert(Attribute("hidden", True))
        assert attrs.to_html() == " hidden"
        attrs.insert(Attribute("hidden", False))
        assert attrs.has_flag("hidden")
        assert attrs.to_html() == " hidden"

    def test_empty_keys_are_ignored(self) -> None:
        attrs = AttributeMap()
        assert attrs.insert(Attribute("", True)) is False
        assert attrs.insert(Attribute("  ", True)) is False
        assert attrs.insert(Attribute("_", static("x"))) is False
        assert len(attrs) == 0

    def test_invalid_keys_are_dropped(self) -> None:
        attrs = AttributeMap()
        assert attrs.insert(Attribute('lol"wut', True)) is False
        assert attrs.insert(Attribute("a b", static("x"))) is False
        assert attrs.insert(Attribute("x=y", static("x"))) is False
        assert attrs.insert(Attribute("<b", True)) is False
        assert len(attrs) == 0


class TestAttributeMapPolicy(unittest.TestCase):
    def test_dynamic_values_are_attribute_encoded(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("class", 'mess"y'))
        assert attrs.get("class") == "mess&quot;y"

    def test_dynamic_event_handlers_are_dropped(self) -> None:
        attrs = AttributeMap()
        with self.assertLogs("toph.attribute", level="DEBUG") as logs:
            assert attrs.insert(Attribute("onclick", "alert(1)")) is False
        assert "onclick" in logs.output[0]
        assert "onclick" not in attrs

    def test_static_values_skip_the_allow_list(self) -> None:
        attrs = AttributeMap()
        assert attrs.insert(Attribute("onclick", static("go()")))
        assert attrs.insert(Attribute("href", static("javascript:void(0)")))
        assert attrs.to_html() == ' href="javascript:void(0)" onclick="go()"'

    def test_static_values_are_still_quote_encoded(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("title", static('say "hi"')))
        assert attrs.get("title") == "say &quot;hi&quot;"

    def test_dynamic_urls_are_filtered_and_encoded(self) -> None:
        attrs = AttributeMap()
        assert attrs.insert(Attribute("href", "javascript:alert(1)")) is False
        assert attrs.insert(Attribute("src", "/about me"))
        assert attrs.get("src") == "/about%20me"
        assert "href" not in attrs

    def test_data_attributes_accept_dynamic_values(self) -> None:
        attrs = AttributeMap()
        assert attrs.insert(Attribute("data_user", "<anything>"))
        assert attrs.get("data-user") == "<anything>"

    def test_custom_policy(self) -> None:
        attrs = AttributeMap(AttributePolicy(safe_attributes=["title"], safe_prefixes=[]))
        assert attrs.insert(Attribute("title", "t"))
        assert attrs.insert(Attribute("data-x", "y")) is False
        assert attrs.insert(Attribute("class", "c")) is False

    def test_copy_is_independent(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("class", "a"))
        other = attrs.copy()
        other.insert(Attribute("class", "b"))
        assert attrs.get("class") == "a"
        assert other.get("class") == "a b"


class TestAttributeMapRendering(unittest.TestCase):
    def test_regular_attributes_sorted_then_booleans(self) -> None:
        attrs = AttributeMap()
        attrs.insert(Attribute("async"))
        attrs.insert(Attribute("id", "x"))
        attrs.insert(Attribute("class", "hidden"))
        attrs.insert(Attribute("checked"))
        assert attrs.to_html() == ' class="hidden" id="x" async checked'
        assert list(attrs) == ["class", "id", "async", "checked"]

    def test_variables_merge_into_style(self) -> None:
        variables = VariableMap()
        variables.insert("gap", "1rem")
        attrs = AttributeMap()
        assert attrs.to_html(variables) == ' style="--gap: 1rem"'

        attrs.insert(Attribute("style", static("color: red;")))
        assert attrs.to_html(variables) == ' style="color: red; --gap: 1rem"'
        # the stored style attribute itself is untouched
        assert attrs.get("style") == "color: red;"


class TestVariableMap(unittest.TestCase):
    def test_values_are_encoded_and_sorted(self) -> None:
        variables = VariableMap()
        variables.insert("gap", "1rem")
        variables.insert("--color", 'r"ed')
        assert variables.to_css() == "--color: r&quot;ed; --gap: 1rem"
        assert variables.get("--gap") == "1rem"

    def test_last_write_wins(self) -> None:
        variables = VariableMap()
        variables.insert("gap", "1rem")
        variables.insert("gap", 2)
        assert variables.to_css() == "--gap: 2"
        assert len(variables) == 1

    def test_invalid_names_raise(self) -> None:
        variables = VariableMap()
        with self.assertRaises(InvalidNameError):
            variables.insert("a b", "x")
        with self.assertRaises(InvalidNameError):
            variables.insert("x;color", "red")
        with self.assertRaises(InvalidNameError):
            variables.insert("", "red")
        assert not variables

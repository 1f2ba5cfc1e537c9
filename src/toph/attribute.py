"""HTML attribute storage, merging and the dynamic-value safety policy."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from typing_extensions import TypeAlias

from .encode import encode_attr, encode_url
from .errors import InvalidNameError
from .markup import Static, _trust
from .policy import DEFAULT_POLICY, AttributePolicy

logger = logging.getLogger(__name__)

# None means "no attribute" and is skipped by Element.with_
AttrValue: TypeAlias = Union[str, bool, int, float, None]

# Characters that may not appear in an attribute name
_INVALID_KEY = re.compile(r"[\s\"'<>/=\x00-\x1f\x7f]")

# Custom property name without the leading "--"
_VARIABLE_NAME = re.compile(r"[A-Za-z0-9_-]+")


def normalize_key(key: str) -> str:
    """Map a builder key to its HTML form: `class_` -> `class`, `data_id` -> `data-id`, `ID` -> `id`."""
    return key.strip().strip("_").replace("_", "-").lower()


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute declaration.

    A `bool` value makes a boolean attribute (rendered as the bare key when
    true, not at all when false). A `Static` value is trusted. Numbers are
    converted to static text. Any other `str` is dynamic and goes through the
    element's `AttributePolicy`.
    """

    key: str
    value: str | bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", normalize_key(self.key))
        value = self.value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            object.__setattr__(self, "value", _trust(str(value)))

    @property
    def is_boolean(self) -> bool:
        return isinstance(self.value, bool)

    @property
    def is_static(self) -> bool:
        return self.is_boolean or isinstance(self.value, Static)


class AttributeMap:
    """Attributes of one element, keyed by normalized name.

    Values are stored already encoded. Repeated keys are merged according to
    the policy: space- and comma-separated attributes accumulate, everything
    else is overwritten.
    """

    __slots__ = ("_boolean", "_regular", "policy")

    def __init__(self, policy: AttributePolicy = DEFAULT_POLICY) -> None:
        self.policy = policy
        self._regular: dict[str, str] = {}
        self._boolean: dict[str, bool] = {}

    def insert(self, attribute: Attribute) -> bool:
        """Add `attribute`; return False if it was ignored or dropped."""
        key = attribute.key
        if not key:
            return False
        if _INVALID_KEY.search(key):
            logger.debug("Dropped attribute with invalid name %r", key)
            return False

        value = attribute.value
        if isinstance(value, bool):
            self._boolean[key] = self._boolean.get(key, False) or value
            return True

        if not isinstance(value, Static):
            filtered = self._filter_dynamic(key, value)
            if filtered is None:
                return False
            value = filtered

        self._merge(key, encode_attr(value))
        return True

    def _filter_dynamic(self, key: str, value: str) -> str | None:
        policy = self.policy
        if policy.is_url_attribute(key):
            url = encode_url(value, policy.url_rule)
            if url is None:
                logger.debug("Dropped attribute %r: rejected URL %r", key, value)
            return url
        if not policy.is_safe_sink(key):
            logger.debug("Dropped attribute %r: not a safe sink for dynamic values", key)
            return None
        return value

    def _merge(self, key: str, encoded: str) -> None:
        existing = self._regular.get(key)
        separator = self.policy.separator(key)
        if existing is None or separator is None or not existing:
            self._regular[key] = encoded
        elif encoded:
            self._regular[key] = existing + separator + encoded

    def get(self, key: str) -> str | None:
        """Return the encoded value of a regular attribute."""
        return self._regular.get(normalize_key(key))

    def has_flag(self, key: str) -> bool:
        """Return True if boolean attribute `key` will be rendered."""
        return self._boolean.get(normalize_key(key), False)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key = normalize_key(key)
        return key in self._regular or key in self._boolean

    def __len__(self) -> int:
        return len(self._regular) + len(self._boolean)

    def __iter__(self) -> Iterator[str]:
        yield from sorted(self._regular)
        yield from sorted(k for k in self._boolean if k not in self._regular)

    def copy(self) -> AttributeMap:
        other = AttributeMap(self.policy)
        other._regular = dict(self._regular)
        other._boolean = dict(self._boolean)
        return other

    def to_html(self, variables: VariableMap | None = None) -> str:
        """Serialize as ` key="value"` pairs followed by boolean keys.

        Both groups are sorted by key. Custom variables are folded into the
        `style` attribute after any explicit declarations.
        """
        regular = self._regular
        if variables:
            regular = dict(regular)
            declarations = variables.to_css()
            explicit = regular.get("style", "").rstrip().rstrip(";")
            regular["style"] = f"{explicit}; {declarations}" if explicit else declarations

        parts = [f' {key}="{value}"' for key, value in sorted(regular.items())]
        parts.extend(f" {key}" for key, on in sorted(self._boolean.items()) if on and key not in regular)
        return "".join(parts)

    def __repr__(self) -> str:
        return f"AttributeMap({self.to_html().strip()!r})"


class VariableMap:
    """CSS custom properties declared on one element (`--name: value`)."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def insert(self, name: str, value: str | int | float) -> None:
        name = name[2:] if name.startswith("--") else name
        if not _VARIABLE_NAME.fullmatch(name):
            raise InvalidNameError("CSS variable", name)
        self._values[name] = encode_attr(str(value))

    def get(self, name: str) -> str | None:
        return self._values.get(name[2:] if name.startswith("--") else name)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def copy(self) -> VariableMap:
        other = VariableMap()
        other._values = dict(self._values)
        return other

    def to_css(self) -> str:
        return "; ".join(f"--{name}: {value}" for name, value in sorted(self._values.items()))

"""Attribute safety policy.

The policy decides what happens to *dynamic* attribute values, i.e. plain
`str` values computed at runtime. Static values (see `toph.markup`) are
never filtered.

- Keys in `url_attributes` are passed through `encode_url` with `url_rule`;
  a rejected URL drops the attribute.
- Any other key must be listed in `safe_attributes` or start with one of
  `safe_prefixes`, otherwise the attribute is dropped.

All attribute names and schemes are expected to be ASCII-lowercase.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field

from .constants import (
    COMMA_SEPARATED_ATTRIBUTES,
    DEFAULT_URL_SCHEMES,
    SAFE_ATTRIBUTE_PREFIXES,
    SAFE_ATTRIBUTES,
    SPACE_SEPARATED_ATTRIBUTES,
    URL_ATTRIBUTES,
)


@dataclass(frozen=True, slots=True)
class UrlRule:
    """Rule for URL-valued attributes (href, src, action, ...).

    Returning/keeping a URL can still cause network requests when the output
    is rendered (notably for <img src>); restrict `allowed_hosts` if that
    matters.
    """

    # Allow relative URLs (including /path, ./path, ../path, ?query).
    allow_relative: bool = True

    # Allow same-document fragments (#foo).
    allow_fragment: bool = True

    # Allow protocol-relative URLs (//example.com). These are effectively
    # network URLs with an inherited scheme.
    allow_protocol_relative: bool = False

    # Allow absolute URLs with these schemes (lowercase). If empty, all
    # absolute URLs are disallowed.
    allowed_schemes: Collection[str] = field(default_factory=lambda: set(DEFAULT_URL_SCHEMES))

    # If provided, absolute and protocol-relative URLs are allowed only if the
    # host is in this allowlist.
    allowed_hosts: Collection[str] | None = None

    def __post_init__(self) -> None:
        # Accept lists/tuples from user code, normalize for internal use.
        if not isinstance(self.allowed_schemes, frozenset):
            object.__setattr__(self, "allowed_schemes", frozenset(s.lower() for s in self.allowed_schemes))
        if self.allowed_hosts is not None and not isinstance(self.allowed_hosts, frozenset):
            object.__setattr__(self, "allowed_hosts", frozenset(h.lower() for h in self.allowed_hosts))


@dataclass(frozen=True, slots=True)
class AttributePolicy:
    """Allow-list driven policy applied to dynamic attribute values.

    `space_separated` and `comma_separated` control how repeated
    declarations of the same key are merged; they apply to static values as
    well.
    """

    safe_attributes: Collection[str] = SAFE_ATTRIBUTES
    safe_prefixes: Collection[str] = SAFE_ATTRIBUTE_PREFIXES
    url_attributes: Collection[str] = URL_ATTRIBUTES
    url_rule: UrlRule = field(default_factory=UrlRule)
    space_separated: Collection[str] = SPACE_SEPARATED_ATTRIBUTES
    comma_separated: Collection[str] = COMMA_SEPARATED_ATTRIBUTES

    def __post_init__(self) -> None:
        # Normalize to frozensets so lookups are fast and the policy stays hashable.
        for name in ("safe_attributes", "url_attributes", "space_separated", "comma_separated"):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))
        if not isinstance(self.safe_prefixes, tuple):
            object.__setattr__(self, "safe_prefixes", tuple(self.safe_prefixes))

    def is_url_attribute(self, key: str) -> bool:
        return key.lower() in self.url_attributes

    def is_safe_sink(self, key: str) -> bool:
        key = key.lower()
        if key in self.safe_attributes:
            return True
        return key.startswith(self.safe_prefixes)

    def separator(self, key: str) -> str | None:
        """Return the merge separator for `key`, or None when the last write wins."""
        if key in self.space_separated:
            return " "
        if key in self.comma_separated:
            return ","
        return None


DEFAULT_URL_RULE: UrlRule = UrlRule()

DEFAULT_POLICY: AttributePolicy = AttributePolicy(url_rule=DEFAULT_URL_RULE)

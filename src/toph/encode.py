"""Context-dependent output encoding.

Each function targets one output context:

- `encode_html` for text content between tags,
- `encode_attr` for the inside of a double-quoted attribute value,
- `encode_url` for URL-valued attributes built from dynamic input.

There is a decent overview here:
https://cheatsheetseries.owasp.org/cheatsheets/Cross_Site_Scripting_Prevention_Cheat_Sheet.html#output-encoding
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, quote, urlsplit

from .policy import DEFAULT_URL_RULE, UrlRule

_HTML_SPECIAL = re.compile(r"[&<>\"']")

_HTML_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def encode_html(text: str) -> str:
    """Escape `& < > " '` for use as element text content."""
    if not _HTML_SPECIAL.search(text):
        return text
    return text.translate(_HTML_TABLE)


def encode_attr(value: str) -> str:
    """Escape the double quote, the only unsafe character in a double-quoted attribute."""
    if '"' not in value:
        return value
    return value.replace('"', "&quot;")


# WHATWG URL percent-encode sets, minus the C0 controls / non-ASCII that
# _percent_encode always encodes. "%" is never encoded, which keeps encoding
# idempotent: "%20" survives a second pass untouched.
_FRAGMENT_SET = frozenset(' "<>`')
_QUERY_SET = frozenset(" \"#<>'")
_PATH_SET = frozenset(' "#<>?`{}^')
_HOST_FORBIDDEN = frozenset(" \"#%/<>?@[\\]^|")

# Characters URL parsers strip from both ends of the input
_C0_AND_SPACE = "".join(chr(c) for c in range(0x21))

# A leading run of "./" and "../" segments
_DOT_PREFIX = re.compile(r"(?:\.\.?/)+")

# Leading scheme, as URL parsers recognize it
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")

# Schemes whose URLs browsers parse with a backslash read as "/"
_SPECIAL_SCHEMES = frozenset({"ftp", "http", "https", "ws", "wss", "file"})


def _percent_encode(text: str, encode_set: frozenset[str]) -> str:
    if all(" " < c < "\x7f" and c not in encode_set for c in text):
        return text
    return "".join(c if " " < c < "\x7f" and c not in encode_set else quote(c, safe="", errors="replace") for c in text)


def _valid_host(host: str, rule: UrlRule) -> bool:
    if any(c in _HOST_FORBIDDEN or c <= " " or c == "\x7f" for c in host):
        return False
    if rule.allowed_hosts is not None and host.lower() not in rule.allowed_hosts:
        return False
    return True


def _encode_tail(parts: SplitResult, path: str) -> str:
    """Reassemble `path?query#fragment` with each component encoded."""
    out = [_percent_encode(path, _PATH_SET)]
    if parts.query:
        out.append("?")
        out.append(_percent_encode(parts.query, _QUERY_SET))
    if parts.fragment:
        out.append("#")
        out.append(_percent_encode(parts.fragment, _FRAGMENT_SET))
    return "".join(out)


def _split_netloc(netloc: str) -> tuple[str, str] | None:
    """Split `netloc` into (userinfo@, host[:port]) or None if it is malformed."""
    userinfo, sep, hostport = netloc.rpartition("@")
    prefix = userinfo + sep
    if any(c <= " " or c in '"<>' for c in prefix):
        return None
    host, _, port = hostport.partition(":") if not hostport.startswith("[") else (hostport, "", "")
    if port and not port.isdigit():
        return None
    return prefix, host


def _encode_network(parts: SplitResult, head: str, rule: UrlRule) -> str | None:
    split = _split_netloc(parts.netloc)
    if split is None:
        return None
    _, host = split
    if host.startswith("["):
        # IPv6 literal, already validated by urlsplit
        if rule.allowed_hosts is not None and host.lower() not in rule.allowed_hosts:
            return None
    elif not _valid_host(host, rule):
        return None
    return f"{head}//{parts.netloc}{_encode_tail(parts, parts.path)}"


def encode_url(value: str, rule: UrlRule = DEFAULT_URL_RULE) -> str | None:
    """Percent-encode a dynamic URL, or return None if it must not be emitted.

    - Absolute URLs are kept only when their scheme is in
      `rule.allowed_schemes` (so `javascript:` and `data:` are rejected by
      default).
    - Relative references are percent-encoded in place. A leading run of
      `./` or `../` segments is preserved exactly; a reference with an empty
      path and a query is rooted (`?q=1` becomes `/?q=1`).
    - Anything that does not parse is rejected.
    """
    value = value.strip(_C0_AND_SPACE).replace("\t", "").replace("\n", "").replace("\r", "")
    leading = _SCHEME.match(value)
    # Relative references inherit a special scheme from the page
    if leading is None or leading.group(0)[:-1].lower() in _SPECIAL_SCHEMES:
        value = value.replace("\\", "/")
    try:
        parts = urlsplit(value)
    except ValueError:
        return None

    if parts.scheme:
        scheme = parts.scheme.lower()
        if scheme not in rule.allowed_schemes:
            return None
        if parts.netloc or value[len(parts.scheme) + 1 :].startswith("//"):
            return _encode_network(parts, f"{scheme}:", rule)
        if rule.allowed_hosts is not None:
            return None
        return f"{scheme}:{_encode_tail(parts, parts.path)}"

    if value.startswith("//"):
        if not rule.allow_protocol_relative:
            return None
        return _encode_network(parts, "", rule)

    if value.startswith("#"):
        if not rule.allow_fragment:
            return None
        return "#" + _percent_encode(parts.fragment, _FRAGMENT_SET)

    if not rule.allow_relative:
        return None

    path = parts.path
    match = _DOT_PREFIX.match(path)
    prefix = match.group(0) if match else ""
    path = path[len(prefix) :]
    if not prefix and not path and parts.query:
        path = "/"
    return prefix + _encode_tail(parts, path)

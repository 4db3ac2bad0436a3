"""URL helpers and text truncation used by the web handlers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence
from urllib.parse import quote

COMMUNITY_EVENT_NSID = "community.lexicon.calendar.event"
LEGACY_EVENT_NSID = "events.smokesignal.calendar.event"

QueryParam = tuple[str, str]


class UnsupportedCollectionError(ValueError):
    """An AT-URI points at a collection that has no web page."""

    def __str__(self) -> str:
        return "error-url-1 Unsupported collection"


def stringify(query: Iterable[QueryParam]) -> str:
    """Join pairs as ``key=value&`` for each pair, values used as given."""
    return "".join(f"{key}={value}&" for key, value in query)


class URLBuilder:
    """Builds https URLs from a host, a path and encoded query parameters."""

    def __init__(self, host: str) -> None:
        if not host.startswith("https://"):
            host = f"https://{host}"
        self._host = host.removesuffix("/")
        self._path = "/"
        self._params: list[QueryParam] = []

    def param(self, key: str, value: str) -> "URLBuilder":
        """Add a query parameter; the value is percent-encoded."""
        self._params.append((key, quote(value, safe="")))
        return self

    def path(self, path: str) -> "URLBuilder":
        """Set the path of the URL."""
        self._path = path
        return self

    def build(self) -> str:
        """Return the assembled URL."""
        query = f"?{stringify(self._params)}" if self._params else ""
        return f"{self._host}{self._path}{query}"


def build_url(host: str, path: str, params: Sequence[Optional[QueryParam]] = ()) -> str:
    """Build a URL, skipping parameters given as ``None``."""
    builder = URLBuilder(host).path(path)
    for param in params:
        if param is not None:
            builder.param(*param)
    return builder.build()


def url_from_aturi(external_base: str, aturi: str) -> str:
    """Map an event AT-URI to its page on this site."""
    parts = aturi.removeprefix("at://").split("/")
    if len(parts) == 3 and parts[1] in (COMMUNITY_EVENT_NSID, LEGACY_EVENT_NSID):
        return build_url(external_base, f"/{parts[0]}/{parts[2]}", [])
    raise UnsupportedCollectionError(aturi)


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in "\x1c\x1d\x1e\x1f"


def _char_len(char: str) -> int:
    return 0 if char == "\0" else len(char.encode("utf-8"))


def _split_bytes(data: bytes, index: int) -> tuple[str, str]:
    if index < 0 or index > len(data):
        raise ValueError(f"byte index {index} is out of bounds")
    try:
        return data[:index].decode("utf-8"), data[index:].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"byte index {index} is not a character boundary") from exc


def truncate_text(text: str, tlen: int, suffix: Optional[str] = None) -> str:
    """Shorten text longer than ``tlen`` bytes near a word boundary."""
    encoded = text.encode("utf-8")
    if len(encoded) <= tlen:
        return text

    if tlen >= len(text):
        result = text
    elif _is_whitespace(text[tlen]):
        result = _split_bytes(encoded, tlen)[0]
    else:
        head, tail = text[:tlen], text[tlen:]
        first_len = sum(map(_char_len, head))

        prev_ws = first_len - 1
        for char in reversed(head):
            if _is_whitespace(char):
                break
            prev_ws -= _char_len(char)

        next_ws = first_len + 1
        for char in tail:
            if _is_whitespace(char):
                break
            next_ws += _char_len(char)

        if next_ws > prev_ws and prev_ws > 0:
            result = _split_bytes(encoded, prev_ws)[0]
        else:
            result = _split_bytes(encoded, next_ws)[1]

    if suffix is not None and len(result.encode("utf-8")) < len(encoded):
        return f"{result} {suffix}"
    return result
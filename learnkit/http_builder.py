"""HTTP request builders: a permissive one and one that enforces a valid order."""

from __future__ import annotations

import enum
import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


class ContentType(enum.Enum):
    """Content type of a request body."""

    URL_ENCODED = "application/x-www-form-urlencoded"
    JSON = "application/json"
    NOT_SET = ""


@dataclass(frozen=True)
class UrlEncoded:
    """A body already in url-encoded form."""

    value: str = ""


class BuilderStateError(RuntimeError):
    """Raised when a builder step is not allowed in the builder's current state."""


def _json_text(body: Any) -> str:
    return json.dumps(body, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def _require_url_encoded(body: Any) -> UrlEncoded:
    if not isinstance(body, UrlEncoded):
        raise TypeError(f"expected UrlEncoded, got {type(body).__name__}")
    return body


class HttpBuilder:
    """Fluent builder that accepts any combination of content type and body."""

    def __init__(self) -> None:
        self.content_type = ContentType.NOT_SET
        self.body = ""

    def add_url_content_type(self) -> HttpBuilder:
        self.content_type = ContentType.URL_ENCODED
        return self

    def add_json_content_type(self) -> HttpBuilder:
        self.content_type = ContentType.JSON
        return self

    def add_url_body(self, body: UrlEncoded) -> HttpBuilder:
        self.body = _require_url_encoded(body).value
        return self

    def add_json_body(self, body: Any) -> HttpBuilder:
        self.body = _json_text(body)
        return self


class _State(enum.Enum):
    EMPTY = enum.auto()
    CONTENT_TYPE_URL = enum.auto()
    CONTENT_TYPE_JSON = enum.auto()
    BODY_URL = enum.auto()
    BODY_JSON = enum.auto()


class BetterHttpBuilder:
    """Builder whose steps must follow content type then a matching body.

    Each step returns a new builder; a step that does not fit the current
    state raises BuilderStateError.
    """

    def __init__(self) -> None:
        self._content_type = ContentType.NOT_SET
        self._body = ""
        self._state = _State.EMPTY

    @property
    def content_type(self) -> ContentType:
        return self._content_type

    @property
    def body(self) -> str:
        return self._body

    @property
    def complete(self) -> bool:
        """True once a body matching the content type has been added."""
        return self._state in (_State.BODY_URL, _State.BODY_JSON)

    def _advance(self, expected: _State, step: str, state: _State,
                 content_type: ContentType, body: str) -> BetterHttpBuilder:
        if self._state is not expected:
            raise BuilderStateError(
                f"{step} is not allowed in state {self._state.name.lower()}"
            )
        successor = BetterHttpBuilder()
        successor._content_type = content_type
        successor._body = body
        successor._state = state
        return successor

    def add_url_content_type(self) -> BetterHttpBuilder:
        return self._advance(_State.EMPTY, "add_url_content_type",
                             _State.CONTENT_TYPE_URL, ContentType.URL_ENCODED, "")

    def add_json_content_type(self) -> BetterHttpBuilder:
        return self._advance(_State.EMPTY, "add_json_content_type",
                             _State.CONTENT_TYPE_JSON, ContentType.JSON, "")

    def add_url_body(self, body: UrlEncoded) -> BetterHttpBuilder:
        text = _require_url_encoded(body).value
        return self._advance(_State.CONTENT_TYPE_URL, "add_url_body",
                             _State.BODY_URL, self._content_type, text)

    def add_json_body(self, body: Any) -> BetterHttpBuilder:
        if self._state is not _State.CONTENT_TYPE_JSON:
            return self._advance(_State.CONTENT_TYPE_JSON, "add_json_body",
                                 _State.BODY_JSON, self._content_type, "")
        return self._advance(_State.CONTENT_TYPE_JSON, "add_json_body",
                             _State.BODY_JSON, self._content_type, _json_text(body))


_SAMPLE_BODY = {"name": "Max", "age": 43}


def bad_http_builder_example() -> HttpBuilder:
    """Build a request whose url-encoded content type contradicts its JSON body."""
    return HttpBuilder().add_url_content_type().add_json_body(_SAMPLE_BODY)


def good_http_builder_example() -> tuple[BetterHttpBuilder, BetterHttpBuilder]:
    """Build the two request shapes the checked builder allows."""
    json_request = BetterHttpBuilder().add_json_content_type().add_json_body(_SAMPLE_BODY)
    url_request = BetterHttpBuilder().add_url_content_type().add_url_body(UrlEncoded())
    return json_request, url_request


def main(argv: Sequence[str] | None = None) -> int:
    """Run the builder examples and show what they produced."""
    del argv
    bad = bad_http_builder_example()
    print(f"unchecked: content type {bad.content_type.name}, body {bad.body!r}")
    for request in good_http_builder_example():
        print(f"checked: content type {request.content_type.name}, body {request.body!r}")
    try:
        BetterHttpBuilder().add_url_content_type().add_json_body(_SAMPLE_BODY)
    except BuilderStateError as error:
        print(f"rejected: {error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
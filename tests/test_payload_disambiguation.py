"""
Tests for payload error construction.

Covers the diagnostics built from real decoder errors and the
missing / malformed / structured-body disambiguation.
"""

import json

import pytest
from pydantic import BaseModel, ValidationError

from gateway.domain.errors import (
    MalformedPayload,
    MissingPayload,
    QueryStringError,
    StructuredBodyError,
    TransportPayload,
    payload_error_from,
)
from gateway.domain.sources.json_body import (
    JsonCategory,
    JsonContentType,
    JsonDeserializeError,
    JsonDiagnostic,
    JsonOverflow,
    JsonSerializeError,
)
from gateway.domain.sources.query import QueryDeserializeError
from gateway.domain.sources.transport import IncompleteBody


def _decode_failure(document: str) -> JsonDeserializeError:
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads(document)
    return JsonDeserializeError(JsonDiagnostic.from_decode_error(info.value))


class _Shape(BaseModel):
    uid: str


class TestJsonDiagnostic:
    """Tests for JsonDiagnostic built from decoder errors."""

    def test_empty_document_is_eof_at_start(self) -> None:
        """An empty document fails at line 1, column 0 with EOF."""
        diagnostic = _decode_failure("").diagnostic
        assert diagnostic.category is JsonCategory.EOF
        assert (diagnostic.line, diagnostic.column) == (1, 0)

    def test_broken_value_is_syntax(self) -> None:
        """A missing value before a closing brace is a syntax error at (1, 7)."""
        diagnostic = _decode_failure('{"a": }').diagnostic
        assert diagnostic.category is JsonCategory.SYNTAX
        assert (diagnostic.line, diagnostic.column) == (1, 7)

    def test_truncated_document_is_eof_at_end(self) -> None:
        """A truncated document is EOF positioned after the consumed input."""
        diagnostic = _decode_failure('{"a": ').diagnostic
        assert diagnostic.category is JsonCategory.EOF
        assert (diagnostic.line, diagnostic.column) == (1, 6)

    def test_unterminated_string_is_eof_at_end(self) -> None:
        """An unterminated string is not mistaken for an empty document."""
        diagnostic = _decode_failure('"abc').diagnostic
        assert diagnostic.category is JsonCategory.EOF
        assert (diagnostic.line, diagnostic.column) == (1, 4)

    def test_whitespace_only_document_consumes_input(self) -> None:
        """Whitespace-only documents report the whitespace as consumed."""
        newline = _decode_failure("\n").diagnostic
        spaces = _decode_failure("   ").diagnostic
        assert (newline.line, newline.column) == (2, 0)
        assert (spaces.line, spaces.column) == (1, 3)

    def test_validation_error_is_data(self) -> None:
        """A valid document of the wrong shape is a data error."""
        with pytest.raises(ValidationError) as info:
            _Shape.model_validate({"uid": 3})
        diagnostic = JsonDiagnostic.from_validation_error(info.value)
        assert diagnostic.category is JsonCategory.DATA
        assert diagnostic.message.startswith("uid:")
        assert str(diagnostic) == diagnostic.message

    def test_invalid_utf8_is_syntax(self) -> None:
        """Bytes that are not UTF-8 are a syntax error on the right line."""
        with pytest.raises(UnicodeDecodeError) as info:
            b'{"a":\n "\xff"}'.decode("utf-8")
        diagnostic = JsonDiagnostic.from_unicode_error(info.value)
        assert diagnostic.category is JsonCategory.SYNTAX
        assert diagnostic.line == 2

    def test_invalid_utf8_column_counts_characters(self) -> None:
        """Multi-byte characters before the bad byte count once each."""
        raw = '{"a":\n "é'.encode("utf-8") + b'\xff"}'
        with pytest.raises(UnicodeDecodeError) as info:
            raw.decode("utf-8")
        diagnostic = JsonDiagnostic.from_unicode_error(info.value)
        assert (diagnostic.line, diagnostic.column) == (2, 4)

    def test_recursion_limit_is_syntax_without_position(self) -> None:
        """Too deep a document is a syntax failure with an unknown position."""
        with pytest.raises(RecursionError) as info:
            json.loads("[" * 100000)
        diagnostic = JsonDiagnostic.from_recursion_error(info.value)
        assert diagnostic.category is JsonCategory.SYNTAX
        assert diagnostic.line == 0
        assert str(diagnostic) == "recursion limit exceeded"


class TestDisambiguation:
    """Tests for payload_error_from on JSON extractor failures."""

    def test_empty_body_is_missing_payload(self) -> None:
        """EOF at line 1, column 0 means no body was sent."""
        assert payload_error_from(_decode_failure("")) == MissingPayload()

    def test_syntax_error_is_malformed_payload(self) -> None:
        """A syntax error keeps the original error for rendering."""
        error = _decode_failure('{"a": }')
        wrapped = payload_error_from(error)
        assert isinstance(wrapped, MalformedPayload)
        assert wrapped.error is error

    @pytest.mark.parametrize("document", ['{"a": ', "\n", "   ", '"abc'])
    def test_eof_elsewhere_is_malformed_payload(self, document: str) -> None:
        """EOF at any other position is a broken body, not a missing one."""
        assert isinstance(payload_error_from(_decode_failure(document)), MalformedPayload)

    def test_eof_position_is_checked_before_category(self) -> None:
        """Only EOF qualifies as missing, even at line 1, column 0."""
        data = JsonDeserializeError(JsonDiagnostic(JsonCategory.DATA, 1, 0, "bad"))
        syntax = JsonDeserializeError(JsonDiagnostic(JsonCategory.SYNTAX, 1, 0, "bad"))
        io = JsonDeserializeError(JsonDiagnostic(JsonCategory.IO, 1, 0, "bad"))
        assert isinstance(payload_error_from(data), StructuredBodyError)
        assert isinstance(payload_error_from(syntax), MalformedPayload)
        assert isinstance(payload_error_from(io), MalformedPayload)

    @pytest.mark.parametrize(
        "error",
        [JsonOverflow(10), JsonContentType(), JsonSerializeError("boom")],
    )
    def test_other_json_failures_are_kept_unchanged(self, error) -> None:
        """Non-deserialization failures are wrapped without transformation."""
        wrapped = payload_error_from(error)
        assert isinstance(wrapped, StructuredBodyError)
        assert wrapped.error is error

    def test_transport_and_query_errors_are_wrapped(self) -> None:
        """Transport and query failures need no disambiguation."""
        transport = IncompleteBody()
        query = QueryDeserializeError("limit: bad")
        assert payload_error_from(transport) == TransportPayload(transport)
        assert payload_error_from(query) == QueryStringError(query)

    def test_unknown_error_is_rejected(self) -> None:
        """Only payload extraction failures can be wrapped."""
        with pytest.raises(TypeError):
            payload_error_from(ValueError("nope"))

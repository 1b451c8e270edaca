"""
Tests for URL, query and body encoding.
"""

import io
from datetime import date

import pytest

from httpreq.codec import (
    build_url,
    decode_body,
    encode_body,
    encode_query,
    merge_headers,
)


class TestBuildUrl:
    def test_relative_url_joined_to_base(self):
        assert build_url("https://api.example.com/v1/", "/users") == "https://api.example.com/v1/users"
        assert build_url("https://api.example.com/v1", "users") == "https://api.example.com/v1/users"

    def test_absolute_url_wins(self):
        assert build_url("https://api.example.com", "http://other.example.com/x") == "http://other.example.com/x"

    def test_no_base(self):
        assert build_url(None, "/users") == "/users"

    def test_empty_url_targets_base(self):
        assert build_url("https://api.example.com", "") == "https://api.example.com"


class TestMergeHeaders:
    def test_override_wins_case_insensitively(self):
        merged = merge_headers(
            {"Content-Type": "application/json", "Accept": "*/*"},
            {"content-type": "text/plain"},
        )

        assert merged == {"Accept": "*/*", "content-type": "text/plain"}

    def test_base_not_mutated(self):
        base = {"Accept": "*/*"}
        merge_headers(base, {"X-Trace": "1"})

        assert base == {"Accept": "*/*"}


class TestEncodeQuery:
    def test_mapping(self):
        pairs = encode_query({"a": 1, "flag": True, "skip": None, "ids": [1, 2]})

        assert pairs == [("a", "1"), ("flag", "true"), ("ids", "1"), ("ids", "2")]

    def test_dates_and_nested(self):
        pairs = encode_query({"day": date(2024, 1, 31), "filter": {"x": 1}})

        assert pairs == [("day", "2024-01-31"), ("filter", '{"x": 1}')]

    def test_string_passes_through(self):
        assert encode_query("?a=1&b=2") == "a=1&b=2"

    def test_none(self):
        assert encode_query(None) is None

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            encode_query(42)


class TestEncodeBody:
    def test_json_default(self):
        assert encode_body({"a": 1}, {"Content-Type": "application/json"}) == b'{"a": 1}'

    def test_bytes_and_str(self):
        assert encode_body(b"\x00\x01", {}) == b"\x00\x01"
        assert encode_body("héllo", {}) == "héllo".encode("utf-8")

    def test_form_encoded(self):
        headers = {"content-type": "application/x-www-form-urlencoded"}

        assert encode_body({"a": 1, "b": "x y"}, headers) == b"a=1&b=x+y"

    def test_none(self):
        assert encode_body(None, {}) is None


class TestDecodeBody:
    def test_json(self):
        assert decode_body(b'{"a": [1, 2]}', "json") == {"a": [1, 2]}

    def test_json_empty_body(self):
        assert decode_body(b"", "json") is None

    def test_json_falls_back_to_text(self):
        assert decode_body(b"<html></html>", "json") == "<html></html>"

    def test_text(self):
        assert decode_body('café'.encode("latin-1"), "text", "latin-1") == "café"

    def test_unknown_charset_uses_utf8(self):
        assert decode_body(b"ok", "text", "no-such-charset") == "ok"

    @pytest.mark.parametrize("response_type", ["arraybuffer", "binary"])
    def test_binary(self, response_type):
        assert decode_body(b"\xff\x00", response_type) == b"\xff\x00"

    def test_stream(self):
        body = decode_body(b"chunk", "stream")

        assert isinstance(body, io.BytesIO)
        assert body.read() == b"chunk"

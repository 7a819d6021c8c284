"""Tests for parameter map helpers."""

import pytest

from post_connections.domain.helpers import (
    decode_parameters,
    encode_parameters,
    merge_parameters,
)


class TestMergeParameters:
    """Test override merge rule."""

    @pytest.mark.parametrize(
        "base,overrides",
        [
            ({}, {}),
            ({"a": "1"}, {}),
            ({}, {"a": "1"}),
            ({"a": "1", "b": "2"}, {"b": "3"}),
            ({"a": "1", "b": "2"}, {"c": "3", "a": "9"}),
        ],
    )
    def test_override_keys_win_and_base_keys_preserved(self, base, overrides):
        merged = merge_parameters(base, overrides)

        for key, value in overrides.items():
            assert merged[key] == value
        for key in base.keys() - overrides.keys():
            assert merged[key] == base[key]
        assert set(merged) == set(base) | set(overrides)

    def test_inputs_not_modified(self):
        base = {"a": "1"}
        overrides = {"a": "2"}

        merge_parameters(base, overrides)

        assert base == {"a": "1"}
        assert overrides == {"a": "2"}

    def test_none_overrides(self):
        assert merge_parameters({"a": "1"}, None) == {"a": "1"}


class TestEncodeParameters:
    """Test url encoding of parameter maps."""

    def test_encode_pairs(self):
        encoded = encode_parameters({"user": "bob", "token": "abc"})
        assert sorted(encoded.split("&")) == ["token=abc", "user=bob"]

    def test_encode_empty(self):
        assert encode_parameters({}) == ""

    def test_values_not_percent_escaped(self):
        assert encode_parameters({"q": "a b/c"}) == "q=a b/c"


class TestDecodeParameters:
    """Test decoding of url-encoded bodies."""

    def test_decode_pairs(self):
        assert decode_parameters("user=bob&token=abc") == {
            "user": "bob",
            "token": "abc",
        }

    def test_decode_empty(self):
        assert decode_parameters("") == {}

    def test_decode_skips_empty_segments(self):
        assert decode_parameters("&a=1&&b=2&") == {"a": "1", "b": "2"}

    def test_decode_missing_value(self):
        assert decode_parameters("flag&a=") == {"flag": "", "a": ""}

    def test_decode_keeps_padding_after_first_equals(self):
        """Base64 padding survives because only the first '=' splits."""
        assert decode_parameters("image1=aGk=") == {"image1": "aGk="}

    def test_later_duplicate_wins(self):
        assert decode_parameters("a=1&a=2") == {"a": "2"}

    @pytest.mark.parametrize(
        "parameters",
        [
            {},
            {"a": "1"},
            {"token": "abc", "user": "bob", "empty": ""},
            {"k1": "v 1", "k2": "v/2", "k3": "v:3"},
        ],
    )
    def test_encode_decode_encode_idempotent(self, parameters):
        encoded = encode_parameters(parameters)
        assert encode_parameters(decode_parameters(encoded)) == encoded

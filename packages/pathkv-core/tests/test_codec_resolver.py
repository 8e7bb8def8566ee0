"""Tests for the value codec and the path resolver."""
import pytest

from pathkv.codec import decode_value, encode_value, is_structured, loads
from pathkv.errors import UnsupportedValueError
from pathkv.resolver import is_index, resolve_path, split_path


class TestEncodeValue:
    def test_compact_json_for_structures(self):
        assert encode_value({"a": [1, 2], "b": {"c": None}}) == '{"a":[1,2],"b":{"c":null}}'

    def test_keeps_unicode(self):
        assert encode_value({"city": "Zürich"}) == '{"city":"Zürich"}'

    def test_rejects_non_finite_float_in_structure(self):
        with pytest.raises(UnsupportedValueError):
            encode_value([float("nan")])

    def test_rejects_class_objects(self):
        with pytest.raises(UnsupportedValueError):
            encode_value(dict)

    def test_rejects_bytes(self):
        with pytest.raises(UnsupportedValueError, match="bytes"):
            encode_value(b"raw")

    def test_is_structured(self):
        assert is_structured({}) is True
        assert is_structured([]) is True
        assert is_structured((1,)) is True
        assert is_structured("[]") is False
        assert is_structured(0) is False


class TestDecodeValue:
    @pytest.mark.parametrize("raw,expected", [
        ('{"a":1}', {"a": 1}),
        ("[1,2]", [1, 2]),
        ("42", 42),
        ("1.5", 1.5),
        ("false", False),
        ("null", None),
        ('"quoted"', "quoted"),
    ])
    def test_valid_json(self, raw, expected):
        assert decode_value(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "{not json", "Infinity", "1.0.0", ""])
    def test_invalid_json_falls_back_to_raw(self, raw):
        assert decode_value(raw) == raw

    def test_strict_loads_raises(self):
        with pytest.raises(ValueError):
            loads("{not json")


class TestSplitPath:
    def test_plain_key(self):
        assert split_path("user") == ("user", [])

    def test_dotted_key(self):
        assert split_path("user.addresses.0.city") == ("user", ["addresses", "0", "city"])

    def test_only_dots(self):
        assert split_path("..") == ("", ["", ""])


class TestIsIndex:
    @pytest.mark.parametrize("segment", ["0", "10", "007"])
    def test_digits(self, segment):
        assert is_index(segment) is True

    @pytest.mark.parametrize("segment", ["", "-1", "1a", "1.5", " 1", "1\n", "٣"])
    def test_not_digits(self, segment):
        assert is_index(segment) is False


class TestResolvePath:
    def test_no_segments_returns_value(self):
        assert resolve_path({"a": 1}, []) == {"a": 1}

    def test_mixed_path(self):
        value = {"users": [{"name": "Ada"}, {"name": "Grace"}]}
        assert resolve_path(value, ["users", "1", "name"]) == "Grace"

    def test_stops_at_first_missing_segment(self):
        assert resolve_path({"a": {"b": 1}}, ["x", "b"]) is None

    def test_none_root(self):
        assert resolve_path(None, ["a"]) is None

    def test_falsy_member_default(self):
        assert resolve_path({"n": 0}, ["n"]) is None

    def test_falsy_member_strict(self):
        assert resolve_path({"n": 0}, ["n"], strict_presence=True) == 0

    def test_falsy_intermediate_strict_stops_cleanly(self):
        assert resolve_path({"n": 0}, ["n", "x"], strict_presence=True) is None

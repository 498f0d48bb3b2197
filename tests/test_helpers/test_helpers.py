"""Tests for Rectangle and the JSON helpers."""

import json

import pytest

from cssbuilder.config import BuilderConfig
from cssbuilder.serialization import from_json, to_json
from cssbuilder.shapes import Rectangle


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields_and_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_area_is_per_instance(self):
        small = Rectangle(1, 2)
        big = Rectangle(10, 20)
        assert small.area() == 2
        assert big.area() == 200

    def test_area_follows_mutation(self):
        r = Rectangle(2, 3)
        r.width = 5
        assert r.area() == 15


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_indent_from_config(self):
        text = to_json({"a": 1}, BuilderConfig(json_indent=2))
        assert text == '{\n  "a": 1\n}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            to_json(object())


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_stamps_shape(self):
        r = from_json(Rectangle, '{"width":10, "height":20}')
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_does_not_require_all_fields(self):
        r = from_json(Rectangle, '{"width":3}')
        assert isinstance(r, Rectangle)
        assert r.width == 3

    def test_non_object_returned_as_parsed(self):
        assert from_json(Rectangle, "[1,2,3]") == [1, 2, 3]

    def test_round_trip(self):
        original = Rectangle(4, 5)
        copy = from_json(Rectangle, to_json(original))
        assert copy == original

    def test_slotted_shape(self):
        class Size:
            __slots__ = ("width", "height")

        size = from_json(Size, '{"width":3,"height":4}')
        assert isinstance(size, Size)
        assert (size.width, size.height) == (3, 4)

    def test_frozen_dataclass_shape(self):
        frozen = from_json(BuilderConfig, '{"log_level":"DEBUG","json_indent":2}')
        assert isinstance(frozen, BuilderConfig)
        assert frozen.log_level == "DEBUG"
        assert frozen.json_indent == 2

    def test_slotted_shape_rejects_unknown_key(self):
        class Size:
            __slots__ = ("width",)

        with pytest.raises(AttributeError):
            from_json(Size, '{"depth":1}')

    def test_malformed(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Rectangle, "{not json")

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from textkv.codec import (
    FloatCodec,
    IntCodec,
    ListCodec,
    MapCodec,
    StringCodec,
    TaggedValueCodec,
    resolve_codec,
)
from textkv.errors import InvalidListFormat, InvalidMapFormat, InvalidNumber


def test_string_passes_through_unchanged():
    codec = StringCodec()
    assert codec.encode(" a, b ") == " a, b "
    assert codec.decode(" a, b ") == " a, b "


def test_int_encoding_and_strict_parsing():
    codec = IntCodec()
    assert codec.encode(42) == "42"
    assert codec.encode(-7) == "-7"
    assert codec.decode("42") == 42
    assert codec.decode(" -7 ") == -7
    for bad in ["thirty", "42abc", "4.2", "1_000", "", "9" * 5000]:
        with pytest.raises(InvalidNumber) as info:
            codec.decode(bad)
        assert info.value.kind == "int"


def test_float_encoding_and_strict_parsing():
    codec = FloatCodec()
    assert codec.encode(4.5) == "4.5"
    assert codec.encode(3) == "3.0"
    assert codec.encode(1e-05) == "1e-05"
    assert codec.decode("4.5") == 4.5
    assert codec.decode("1e3") == 1000.0
    assert codec.decode(".5") == 0.5
    with pytest.raises(InvalidNumber):
        codec.decode("4.5kg")
    with pytest.raises(InvalidNumber):
        codec.decode("four")


def test_empty_list_encodes_to_brackets_and_back_to_empty():
    codec = ListCodec()
    assert codec.encode([]) == "[]"
    assert codec.decode("[]") == []
    assert codec.decode("[  ]") == []
    assert codec.decode("") == []


def test_list_decoding_trims_and_keeps_inner_empty_items():
    codec = ListCodec()
    assert codec.encode(["a", "b", "c"]) == "[a,b,c]"
    assert codec.decode("[a, b ,c]") == ["a", "b", "c"]
    assert codec.decode("[a,,b]") == ["a", "", "b"]
    assert codec.decode("[a,b,]") == ["a", "b"]


def test_list_requires_both_brackets():
    codec = ListCodec()
    for bad in ["[a,b", "a,b]", "a,b", "["]:
        with pytest.raises(InvalidListFormat):
            codec.decode(bad)


def test_list_of_ints_uses_element_codec():
    codec = ListCodec(element=IntCodec())
    assert codec.encode([1, 2, 3]) == "[1,2,3]"
    assert codec.decode("[1, 2, 3]") == [1, 2, 3]
    with pytest.raises(InvalidNumber):
        codec.decode("[1,x]")


def test_map_encoding_follows_insertion_order():
    codec = MapCodec()
    assert codec.encode({"b": "2", "a": "1"}) == "{b:2,a:1}"
    assert codec.encode({}) == "{}"


def test_map_decoding_is_lenient_by_default():
    codec = MapCodec()
    assert codec.decode("{a: 1, b:2}") == {"a": "1", "b": "2"}
    assert codec.decode("a:1,b:2") == {"a": "1", "b": "2"}
    assert codec.decode("{a:1,junk,b:2}") == {"a": "1", "b": "2"}
    assert codec.decode("{url:http://host}") == {"url": "http://host"}
    assert codec.decode("{}") == {}


def test_strict_map_rejects_entries_without_colon():
    codec = MapCodec(strict=True)
    with pytest.raises(InvalidMapFormat) as info:
        codec.decode("{a:1,junk}")
    assert info.value.piece == "junk"
    assert codec.decode("{a:1,}") == {"a": "1"}


def test_map_values_use_value_codec():
    codec = MapCodec(value=FloatCodec())
    assert codec.decode("{x:1.5,y:2}") == {"x": 1.5, "y": 2.0}


def test_resolve_codec():
    assert resolve_codec("int").type_tag == "int"
    assert resolve_codec("list", "int").element.type_tag == "int"
    assert resolve_codec("map", strict_maps=True).strict
    assert isinstance(resolve_codec("value"), TaggedValueCodec)
    with pytest.raises(ValueError):
        resolve_codec("blob")
    with pytest.raises(ValueError):
        resolve_codec("list", "bool")

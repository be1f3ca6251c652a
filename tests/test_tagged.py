import pytest

from textkv.codec import Scalar, StrList, StrMap, TaggedValueCodec
from textkv.errors import MismatchedBrackets, MismatchedQuotes


@pytest.fixture
def codec():
    return TaggedValueCodec()


def test_shape_is_recovered_from_syntax(codec):
    assert codec.decode("hello") == Scalar("hello")
    assert codec.decode("  hello  ") == Scalar("hello")
    assert codec.decode("'hi there'") == Scalar("hi there")
    assert codec.decode('"x"') == Scalar("x")
    assert codec.decode("[a, b]") == StrList(["a", "b"])
    assert codec.decode("{k:v}") == StrMap({"k": "v"})
    assert codec.decode("") == Scalar("")


def test_unterminated_quotes(codec):
    for bad in ['"abc', "'abc\"", '"']:
        with pytest.raises(MismatchedQuotes):
            codec.decode(bad)


def test_unterminated_brackets(codec):
    for bad in ["[a,b", "{a:1", "[a}", "{a:1]"]:
        with pytest.raises(MismatchedBrackets):
            codec.decode(bad)


def test_encoding_does_not_embed_a_kind_marker(codec):
    assert codec.encode(Scalar("plain")) == "plain"
    assert codec.encode(StrList([])) == "[]"
    assert codec.encode(StrList(["a", "b"])) == "[a,b]"
    assert codec.encode(StrMap({"a": "1"})) == "{a:1}"


def test_ambiguous_strings_are_quoted_and_survive(codec):
    for text in ["[not a list]", "{nor a map}", '"quoted"', "'single", " padded "]:
        encoded = codec.encode(Scalar(text))
        assert encoded.startswith('"')
        assert codec.decode(encoded) == Scalar(text)


def test_encode_rejects_foreign_values(codec):
    with pytest.raises(TypeError):
        codec.encode("raw string")

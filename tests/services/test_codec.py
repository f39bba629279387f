"""Tests for the JSON domain literal codec."""

import pytest

from finset.domain.tagged import TaggedValue
from finset.domain.types import Mode, collection, sequence
from finset.services.codec import (
    CodecError,
    decode_domain,
    decode_named_domains,
    encode_domain,
    encode_value,
    parse_domain,
)


class TestParseDomain:
    def test_array_is_sequence(self) -> None:
        domain = parse_domain('["a", "b", "a"]')
        assert domain.mode is Mode.SEQUENCE
        assert domain.elements == ("a", "b", "a")

    def test_collection_object(self) -> None:
        domain = parse_domain('{"collection": [2, 4, 2, 6]}')
        assert domain == collection([2, 4, 6])

    def test_scalars_keep_their_types(self) -> None:
        domain = parse_domain('[1, 1.5, true, "x"]')
        assert domain.elements == (1, 1.5, True, "x")
        assert isinstance(domain.elements[2], bool)

    def test_nested_domains(self) -> None:
        domain = parse_domain('[[1, 2], {"collection": ["a"]}]')
        assert domain.elements == (sequence([1, 2]), collection(["a"]))

    def test_empty(self) -> None:
        assert len(parse_domain("[]")) == 0

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            '"abc"',
            "42",
            "[null]",
            '{"items": [1]}',
            '{"collection": 3}',
            '{"collection": [], "extra": 1}',
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(CodecError):
            parse_domain(text)

    def test_codec_error_is_value_error(self) -> None:
        assert issubclass(CodecError, ValueError)


class TestNamedDomains:
    def test_decodes_each_tag(self) -> None:
        named = decode_named_domains({"idle": [], "error": ["timeout"]})
        assert named["idle"] == sequence([])
        assert named["error"] == sequence(["timeout"])

    def test_error_names_the_tag(self) -> None:
        with pytest.raises(CodecError, match="'loading'"):
            decode_named_domains({"loading": "oops"})


class TestEncode:
    def test_sequence_and_collection(self) -> None:
        assert encode_domain(sequence([1, 2, 1])) == [1, 2, 1]
        assert encode_domain(collection(["a"])) == {"collection": ["a"]}

    def test_tuples_become_lists(self) -> None:
        assert encode_value(("a", 1)) == ["a", 1]

    def test_tagged_values(self) -> None:
        encoded = encode_value(TaggedValue("some", sequence([1])))
        assert encoded == {"tag": "some", "value": [1]}

    def test_decode_of_encode_is_identity(self) -> None:
        domain = collection([sequence([1, True]), "x"])
        assert decode_domain(encode_domain(domain)) == domain

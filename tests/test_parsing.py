"""
Unit tests for the YAML parsing backends.

Both backends must agree on multi-document streams, the duplicate-key policy
and on reporting malformed documents as ParseError with a location.
"""
import io
from pathlib import Path

import pytest

from yaml_validator.exceptions import ParseError
from yaml_validator.parsing import PyYamlParser, RuamelParser, get_parser

SOURCE = Path("/virtual/test.yaml")


@pytest.fixture(params=["pyyaml", "ruamel"])
def parser(request):
    return get_parser(request.param)


def parse(parser, content: str, allow_duplicate_keys: bool = False):
    stream = io.BytesIO(content.encode("utf-8"))
    return list(parser.load_all(stream, allow_duplicate_keys, source=SOURCE))


class TestLoadAll:

    def test_multiple_documents_are_yielded_in_order(self, parser):
        documents = parse(parser, "---\na: 1\n---\nb: 2\n")

        assert [dict(d) for d in documents] == [{"a": 1}, {"b": 2}]

    def test_empty_stream_yields_no_documents(self, parser):
        assert parse(parser, "") == []

    def test_duplicate_keys_rejected_by_default(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parse(parser, "a: 1\na: 2\n")

        assert exc_info.value.path == SOURCE
        assert exc_info.value.line == 2

    def test_duplicate_keys_tolerated_when_allowed(self, parser):
        documents = parse(parser, "a: 1\na: 2\n", allow_duplicate_keys=True)

        assert len(documents) == 1

    def test_nested_duplicate_keys_rejected(self, parser):
        with pytest.raises(ParseError):
            parse(parser, "outer:\n  x: 1\n  x: 2\n")

    def test_same_key_in_different_mappings_is_fine(self, parser):
        documents = parse(parser, "first:\n  x: 1\nsecond:\n  x: 2\n")

        assert len(documents) == 1

    def test_merge_key_override_is_not_a_duplicate(self, parser):
        content = "base: &base\n  x: 1\nderived:\n  <<: *base\n  x: 2\n"

        documents = parse(parser, content)

        assert documents[0]["derived"]["x"] == 2

    def test_malformed_document_reports_location(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parse(parser, "key: [unclosed\n")

        error = exc_info.value
        assert error.line is not None
        assert error.column is not None
        assert str(SOURCE) in str(error)

    def test_impossible_date_is_a_parse_error(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parse(parser, "when: 2020-02-30\n")

        assert exc_info.value.path == SOURCE
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_error_stops_after_last_good_document(self, parser):
        stream = io.BytesIO(b"---\na: 1\n---\n: bad: yaml: ::\n")
        documents = parser.load_all(stream, False, source=SOURCE)

        assert dict(next(documents)) == {"a": 1}
        with pytest.raises(ParseError):
            next(documents)


class TestUniqueKeySafeLoader:

    @pytest.mark.parametrize("content", [
        "1: a\ntrue: b\n",
        "1: a\n1.0: b\n",
    ])
    def test_equal_values_of_different_types_are_distinct_keys(self, content):
        documents = parse(PyYamlParser(), content)

        assert len(documents) == 1


class TestGetParser:

    def test_known_backends(self):
        assert isinstance(get_parser("pyyaml"), PyYamlParser)
        assert isinstance(get_parser("ruamel"), RuamelParser)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown YAML parser 'snake'"):
            get_parser("snake")

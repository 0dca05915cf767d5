import pytest

from shortsmind.core.exceptions import SchemaError
from shortsmind.services.infrastructure.parsing import (
    extract_largest_balanced_json,
    parse_json_payload,
    strip_markdown_fences,
)


class TestExtractLargestBalancedJson:

    def test_picks_largest_object(self):
        text = 'note {"a": 1} and {"concepts": [{"id": "x"}]} end'
        assert extract_largest_balanced_json(text) == '{"concepts": [{"id": "x"}]}'

    def test_ignores_braces_inside_strings(self):
        text = 'reply: {"hook": "a } tricky { value"}'
        assert extract_largest_balanced_json(text) == '{"hook": "a } tricky { value"}'

    def test_array_wins_when_larger(self):
        text = 'Here: {"a": 1} then [{"id": "x"}, {"id": "y"}]'
        assert extract_largest_balanced_json(text) == '[{"id": "x"}, {"id": "y"}]'

    def test_none_when_absent(self):
        assert extract_largest_balanced_json("no json here") is None
        assert extract_largest_balanced_json("") is None


def test_strip_markdown_fences():
    assert strip_markdown_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_markdown_fences('  {"a": 1}  ') == '{"a": 1}'


class TestParseJsonPayload:

    def test_plain_json(self):
        assert parse_json_payload('{"concepts": []}') == {"concepts": []}

    def test_top_level_array(self):
        assert parse_json_payload("[1, 2]") == [1, 2]

    def test_fenced_json(self):
        assert parse_json_payload('```json\n[{"id": "a"}]\n```') == [{"id": "a"}]

    def test_json_wrapped_in_prose(self):
        assert parse_json_payload('Here you go: {"concepts": [1]} Enjoy!') == {"concepts": [1]}

    @pytest.mark.parametrize("reply", [None, "", "   ", "not json at all", '{"broken": '])
    def test_unusable_reply_raises(self, reply):
        with pytest.raises(SchemaError):
            parse_json_payload(reply)

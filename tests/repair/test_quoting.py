import json

import pytest

from quasijson.repair.quoting import (
    normalize_empty_fields,
    quote_barewords,
    quote_fields,
    strip_single_quotes,
)


class TestNormalizeEmptyFields:
    @pytest.mark.parametrize(
        'text, expected',
        [
            ('{city:,}', "{city:'',}"),
            ('{a: 1, b:}', "{a: 1, b: ''}"),
            ('{a:, b:  }', "{a:'', b: ''}"),
            ('{a,,b: 1}', "{a:'',b: 1}"),
        ],
    )
    def test_empty_values(self, text, expected):
        assert normalize_empty_fields(text) == expected

    def test_doubled_comma_without_key_is_left_alone(self):
        assert normalize_empty_fields('{,,,}') == '{,,,}'


class TestQuoteBarewords:
    def test_quotes_keys_and_values(self):
        assert (
            quote_barewords('{name: John, age: 23}')
            == '{"name": "John", "age": 23}'
        )

    def test_literals_can_be_quoted_too(self):
        assert (
            quote_barewords('{n: 5, t: true, z: null}', preserve_literals=False)
            == '{"n": "5", "t": "true", "z": "null"}'
        )

    def test_already_quoted_fields_are_kept(self):
        text = '{"name": "John", age: 23}'
        assert quote_barewords(text) == '{"name": "John", "age": 23}'

    def test_inner_double_quotes_are_escaped(self):
        quoted = quote_barewords('{q: say "hi" now}')

        assert quoted == r'{"q": "say \"hi\" now"}'
        assert json.loads(quoted) == {'q': 'say "hi" now'}

    def test_nested_object_is_quoted_level_by_level(self):
        assert quote_barewords('{a: {b: c}}') == '{"a": {"b": "c"}}'

    def test_nested_array_is_left_untouched(self):
        assert quote_barewords('{a: [x, y], b: c}') == '{"a": [x, y], "b": "c"}'

    def test_trailing_whitespace_is_preserved(self):
        assert quote_barewords('{a: b }') == '{"a": "b" }'

    def test_comma_in_value_leaves_fragment(self):
        assert (
            quote_barewords('{note: hello, world, id: 5}')
            == '{"note": "hello", world, "id": 5}'
        )

    @pytest.mark.parametrize(
        'text, expected',
        [
            ('{a: x b: y}', '{"a": "x" b: y}'),
            ('{name: John age: 23}', '{"name": "John" age: 23}'),
            ('{"a": 1 "b": 2, "c": 3}', '{"a": 1 "b": 2, "c": 3}'),
            ('{a: 1"b": 2}', '{"a": 1"b": 2}'),
        ],
    )
    def test_value_stops_before_next_key(self, text, expected):
        assert quote_barewords(text) == expected

    def test_colon_inside_value_is_kept(self):
        assert (
            quote_barewords('{t: 10:30, u: http://x}')
            == '{"t": "10:30", "u": "http://x"}'
        )


def test_strip_single_quotes_is_lossy():
    assert strip_single_quotes('{"name": "O\'Brien"}') == '{"name": "OBrien"}'


class TestQuoteFields:
    def test_empty_field_becomes_empty_string(self):
        assert quote_fields('{city:,}') == '{"city": "",}'

    def test_single_quotes_can_be_kept(self):
        assert (
            quote_fields("{name: O'Brien}", strip_quotes=False)
            == '{"name": "O\'Brien"}'
        )

    def test_single_quotes_stripped_by_default(self):
        assert quote_fields("{name: O'Brien}") == '{"name": "OBrien"}'

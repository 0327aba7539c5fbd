import pytest

from quasijson.repair.delimiters import (
    Delimiter,
    FieldToken,
    count_orphans,
    has_unseparated_fields,
    join_fields,
    restore_commas,
    split_fields,
)


class TestFieldToken:
    def test_complete_field(self):
        token = FieldToken(text=' "a": 1', position=0)
        assert token.is_complete
        assert not token.is_orphan
        assert not token.is_blank

    def test_blank_token(self):
        token = FieldToken(text='  ', position=1)
        assert token.is_blank
        assert not token.is_orphan

    @pytest.mark.parametrize('text', [' world', '}', ' ] '])
    def test_orphans(self, text):
        assert FieldToken(text=text, position=2).is_orphan


class TestSplitFields:
    def test_splits_on_top_level_commas_with_positions(self):
        tokens = split_fields('{"a": 1, b, "c": 2}')

        assert [t.text for t in tokens] == ['{"a": 1', ' b', ' "c": 2}']
        assert [t.position for t in tokens] == [0, 1, 2]

    def test_ignores_commas_inside_strings_and_nested_containers(self):
        tokens = split_fields('{"a": "x,y", "b": [1, 2], "c": {"d": 1, "e": 2}}')

        assert [t.text for t in tokens] == [
            '{"a": "x,y"',
            ' "b": [1, 2]',
            ' "c": {"d": 1, "e": 2}}',
        ]

    def test_escaped_quote_does_not_end_string(self):
        tokens = split_fields(r'{"a": "say \",hi", "b": 1}')
        assert len(tokens) == 2

    def test_doubled_commas_leave_blank_tokens(self):
        tokens = split_fields('{,,}')
        assert [t.is_blank for t in tokens] == [False, True, False]

    def test_join_is_inverse_of_split(self):
        buffer = '{"a": 1, b,, "c": [1, 2]}'
        assert join_fields(split_fields(buffer)) == buffer


def test_count_orphans():
    assert count_orphans(split_fields('{"a": "x", y, "b": 1, z}')) == 2


def test_restore_commas():
    placeholder = Delimiter.PLACEHOLDER.value
    assert restore_commas(f'"hello{placeholder} world"') == '"hello, world"'


@pytest.mark.parametrize(
    'buffer',
    [
        '{"a": "x" "b": "y"}',
        '{"a": "x" b: y}',
        '{"a": 1 "b": 2, "c": 3}',
        '{"a": 1, "b": 2 "c": 3}',
    ],
)
def test_unseparated_fields(buffer):
    assert has_unseparated_fields(buffer)


@pytest.mark.parametrize(
    'buffer',
    [
        '{"a": 1}',
        '{"a": {"b": 1, "c": 2}, "url": "http://x"}',
        '{"t": "10:30", "b": [1, 2]}',
        '{}',
    ],
)
def test_separated_fields(buffer):
    assert not has_unseparated_fields(buffer)

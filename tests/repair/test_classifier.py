import io
import logging

import pytest

from quasijson._core.error import NullInputError
from quasijson.repair.classifier import classify, read_input
from quasijson.repair.schema import Validity


class TestReadInput:
    def test_str_passes_through(self):
        assert read_input('{a: 1}') == '{a: 1}'

    def test_bytes_are_decoded(self):
        assert read_input('{"name": "José"}'.encode()) == '{"name": "José"}'

    def test_invalid_utf8_raises(self):
        with pytest.raises(UnicodeDecodeError):
            read_input(b'{"name": "\xff"}')

        with pytest.raises(UnicodeDecodeError):
            read_input(io.BytesIO(b'{name: \xfe}'))

    def test_streams_are_read(self):
        assert read_input(io.StringIO('{a: 1}')) == '{a: 1}'
        assert read_input(io.BytesIO(b'{a: 1}')) == '{a: 1}'

    def test_other_objects_use_str(self):
        assert read_input(12) == '12'


class TestClassify:
    def test_none_raises(self):
        with pytest.raises(NullInputError, match='Object to validate is null.'):
            classify(None)

    def test_parsed_container_is_returned_as_is(self):
        data = {'a': [1, 2]}

        classified = classify(data)

        assert classified.is_valid
        assert classified.value is data
        assert classified.text is None

    @pytest.mark.parametrize(
        'json_input, expected',
        [
            ('{"a": 1}', {'a': 1}),
            ('[1, 2]', [1, 2]),
            (b'{"a": null}', {'a': None}),
            (io.StringIO('{"a": true}'), {'a': True}),
        ],
    )
    def test_valid_text(self, json_input, expected):
        classified = classify(json_input)

        assert classified.validity is Validity.VALID
        assert classified.value == expected

    @pytest.mark.parametrize('text', ['{name: John}', '5', '"just a string"', ''])
    def test_invalid_text_is_carried_forward(self, text):
        classified = classify(text)

        assert classified.validity is Validity.INVALID
        assert classified.text == text
        assert classified.value is None

    def test_invalid_input_is_logged(self, caplog):
        caplog.set_level(logging.INFO)

        classify('{name: John}')

        assert 'Invalid json: {name: John}' in caplog.text

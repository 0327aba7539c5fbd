import pytest

from quasijson._core.error import (
    CustomBaseException,
    JSONRepairError,
    MissingFieldSeparatorsError,
    NullInputError,
    PostRepairSyntaxError,
    RepairErrorKind,
    UnrecoverableCorruptionError,
)


@pytest.mark.parametrize(
    'error_cls, kind',
    [
        (UnrecoverableCorruptionError, RepairErrorKind.UNRECOVERABLE_CORRUPTION),
        (MissingFieldSeparatorsError, RepairErrorKind.MISSING_FIELD_SEPARATORS),
        (PostRepairSyntaxError, RepairErrorKind.POST_REPAIR_SYNTAX_ERROR),
    ],
)
def test_repair_errors_carry_kind_and_original(error_cls, kind):
    error = error_cls('broken', original='{a,b}')

    assert isinstance(error, JSONRepairError)
    assert isinstance(error, CustomBaseException)
    assert error.kind is kind
    assert error.message == 'broken'
    assert error.original == '{a,b}'
    assert str(error) == 'broken'


def test_null_input_error_defaults():
    error = NullInputError()

    assert error.kind is RepairErrorKind.NULL_INPUT
    assert error.original is None
    assert error.message == 'Object to validate is null.'


def test_post_repair_syntax_error_keeps_repaired_text():
    error = PostRepairSyntaxError('still broken', original='{a: [x}', repaired_text='{"a": [x}')

    assert error.repaired_text == '{"a": [x}'


def test_error_kind_lookup_is_case_insensitive():
    assert RepairErrorKind.from_str('NULL_INPUT') is RepairErrorKind.NULL_INPUT
    assert RepairErrorKind.has_value('post_repair_syntax_error')
    assert not RepairErrorKind.has_value('timeout')

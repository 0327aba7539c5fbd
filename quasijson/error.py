from quasijson._core.error import (
    CustomBaseException,
    JSONRepairError,
    MissingFieldSeparatorsError,
    NullInputError,
    PostRepairSyntaxError,
    RepairErrorKind,
    UnrecoverableCorruptionError,
)

__all__ = [
    'CustomBaseException',
    'JSONRepairError',
    'MissingFieldSeparatorsError',
    'NullInputError',
    'PostRepairSyntaxError',
    'RepairErrorKind',
    'UnrecoverableCorruptionError',
]

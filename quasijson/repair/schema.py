from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, model_validator

from quasijson._core.error import JSONRepairError, RepairErrorKind
from quasijson._core.schema import RichBaseModel, RichEnum

JSONContainer = Union[Dict[str, Any], List[Any]]


class Validity(str, RichEnum):
    VALID = 'valid'
    INVALID = 'invalid'


@dataclass(frozen=True)
class ClassifiedInput:
    """Outcome of the validity check on a caller's input."""

    validity: Validity
    text: Optional[str] = None
    value: Optional[JSONContainer] = None

    @property
    def is_valid(self) -> bool:
        return self.validity is Validity.VALID


@dataclass(frozen=True)
class DisambiguationResult:
    """Buffer produced by the comma disambiguation loop and the number of merges it took."""

    buffer: str
    merges: int = 0


class RepairResult(RichBaseModel):
    """
    Non-raising outcome of a repair: either the parsed JSON container or a
    classified failure, never both.
    """

    data: Optional[JSONContainer] = Field(
        default=None, description='Parsed object (or array) when the repair succeeded.'
    )
    was_valid: bool = Field(
        default=False,
        description='True when the input was valid JSON and no repair stage ran.',
    )
    repaired_text: Optional[str] = Field(
        default=None, description='Text handed to the JSON parser after repair.'
    )
    merges: int = Field(
        default=0, description='Number of fragments folded back into their field.'
    )
    error: Optional[RepairErrorKind] = Field(
        default=None, description='Failure classification when the repair failed.'
    )
    message: Optional[str] = Field(default=None, description='Failure diagnostic.')
    original: Any = Field(
        default=None, description="The caller's input, unchanged.", exclude=True
    )

    @model_validator(mode='after')
    def _data_or_error(self) -> 'RepairResult':
        if (self.data is None) == (self.error is None):
            raise ValueError('RepairResult needs exactly one of data or error')
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_error(cls, error: JSONRepairError) -> 'RepairResult':
        return cls(
            error=error.kind,
            message=error.message,
            original=error.original,
            repaired_text=getattr(error, 'repaired_text', None),
        )

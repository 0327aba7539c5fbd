import json
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic.config import ConfigDict

E = TypeVar('E', bound='RichEnum')


###################################
# BASE MODELS
###################################
class RichBaseModel(BaseModel):
    """Base class for the models returned by the public API"""

    model_config = ConfigDict(extra='forbid', use_enum_values=False)

    def __repr__(self) -> str:
        """Returns a detailed JSON representation for debugging."""
        return f'{self.__class__.__name__}(\n{self.model_dump_json(indent=4, exclude_none=True)}\n)'

    def __str__(self) -> str:
        return f'{self.__class__.__name__}: {json.dumps(self.model_dump(mode="json", exclude_none=True), indent=2)}'

    def to_dict(self, exclude_none: bool = True, **kwargs):
        """Converts the model to a dictionary."""
        return self.model_dump(exclude_none=exclude_none, **kwargs)


###################################
# ENUMS
###################################
class RichEnum(Enum):
    """
    Enum with case-insensitive lookups and value/name checks.
    """

    @classmethod
    def keys(cls) -> List[str]:
        """Return a list of all enum member names."""
        return [member.name for member in cls]

    @classmethod
    def values(cls) -> List[Any]:
        """Return a list of all enum member values."""
        return [member.value for member in cls]

    @classmethod
    def from_str(cls: Type[E], string: str, default: Optional[E] = None) -> E:
        """
        Retrieve enum member by string value (case-insensitive for strings).
        """
        if string is None:
            if default is not None:
                return default
            raise ValueError(f'Cannot look up None in {cls.__name__}')

        for member in cls:
            val = member.value
            if string == val or (
                isinstance(val, str) and string.lower() == val.lower()
            ):
                return member

        if default is not None:
            return default

        raise KeyError(f"'{string}' not found in {cls.__name__}")

    @classmethod
    def has_value(cls, value: Any) -> bool:
        """Check if a value exists in the enum (case-insensitive for strings)."""
        if value is None:
            return False

        return any(
            value == member.value
            or (
                isinstance(value, str)
                and isinstance(member.value, str)
                and value.lower() == member.value.lower()
            )
            for member in cls
        )

    def __str__(self) -> str:
        return str(self.value)

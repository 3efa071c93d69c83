from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictBool, StringConstraints
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Custom pydantic error types raised below; the registry maps them to reasons.
BOOL_NOT_NUMBER = "bool_not_number"
NULL_NOT_ALLOWED = "null_not_allowed"


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass, pydantic would coerce True -> 1
    if isinstance(value, bool):
        raise PydanticCustomError(BOOL_NOT_NUMBER, "Input should be a valid number, not a boolean")
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError(NULL_NOT_ALLOWED, "Field may be omitted but must not be null")
    return value


# Strings on the wire must carry content.
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
Number = Annotated[float, BeforeValidator(_reject_bool)]
WholeNumber = Annotated[int, BeforeValidator(_reject_bool)]
Flag = StrictBool

# Optional fields may be left out, but an explicit null is rejected.
OptionalStr = Annotated[Optional[NonEmptyStr], BeforeValidator(_reject_null)]
OptionalDatetime = Annotated[Optional[datetime], BeforeValidator(_reject_null)]
OptionalObject = Annotated[Optional[Dict[str, Any]], BeforeValidator(_reject_null)]


class ContractModel(BaseModel):
    """Base for every message crossing a service boundary.

    Wire names are camelCase, attributes are snake_case. Objects are closed:
    keys that the contract does not name are rejected. Numbers must be finite.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        allow_inf_nan=False,
    )

    def to_wire(self) -> dict:
        """JSON-compatible dict with wire names, defaults applied, omitted optionals left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

"""Error types raised by the contract registry.

Two kinds only: ConfigurationError for caller defects (asking for a schema,
event, service or example that is not registered) and ValidationError for
candidate data that breaks one or more field constraints.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

ROOT_FIELD = "(root)"


class Reason(str, Enum):
    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    OUT_OF_RANGE = "out_of_range"
    NOT_IN_ENUM = "not_in_enum"
    INVALID_FORMAT = "invalid_format"
    EMPTY = "empty"
    NOT_ALLOWED = "not_allowed"
    INVALID = "invalid"


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: Reason
    message: str
    loc: Tuple[Union[str, int], ...] = ()

    def as_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason.value, "message": self.message}


class ContractError(Exception):
    pass


class ConfigurationError(ContractError, LookupError):
    """Unknown schema/event/service/example key. A programming error, do not retry."""

    def __init__(self, kind: str, key: object):
        self.kind = kind
        self.key = key
        super().__init__(f"unknown {kind}: {key!r}")


class ValidationError(ContractError, ValueError):
    """Candidate data failed one or more field constraints."""

    def __init__(self, schema: str, errors: Iterable[FieldError]):
        self.schema = schema
        self.errors: Tuple[FieldError, ...] = tuple(errors)
        detail = "; ".join(f"{e.field}: {e.reason.value}" for e in self.errors)
        super().__init__(f"{schema} failed validation ({len(self.errors)} problem(s)): {detail}")

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(e.field for e in self.errors)

"""Contract registry: keyed schema lookup plus structural validation.

The default registry is built once at import and read-only afterwards, so
the module-level helpers can be called from any thread without coordination.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, Union

from pydantic import ValidationError as PydanticValidationError

from .errors import ROOT_FIELD, ConfigurationError, FieldError, Reason, ValidationError
from .schemas import EVENT_SCHEMAS, MESSAGE_SCHEMAS, ContractModel, EventEnvelope, EventTypes
from .schemas.base import BOOL_NOT_NUMBER, NULL_NOT_ALLOWED
from .services import SERVICE_ENDPOINTS, ServiceEndpoint, ServiceName
from .utils.logger_util import get_logger

logger = get_logger(__name__)

SchemaKey = Union[str, Type[ContractModel]]

EVENT_TYPE_FIELD = "eventType"

# pydantic error type -> contract reason. Anything else ending in _type or
# _parsing is a type mismatch, the rest is INVALID.
_REASONS: Dict[str, Reason] = {
    "missing": Reason.MISSING,
    "extra_forbidden": Reason.NOT_ALLOWED,
    "enum": Reason.NOT_IN_ENUM,
    "literal_error": Reason.NOT_IN_ENUM,
    "greater_than": Reason.OUT_OF_RANGE,
    "greater_than_equal": Reason.OUT_OF_RANGE,
    "less_than": Reason.OUT_OF_RANGE,
    "less_than_equal": Reason.OUT_OF_RANGE,
    "too_short": Reason.OUT_OF_RANGE,
    "too_long": Reason.OUT_OF_RANGE,
    "finite_number": Reason.OUT_OF_RANGE,
    "string_too_short": Reason.EMPTY,
    "value_error": Reason.INVALID_FORMAT,
    "datetime_parsing": Reason.INVALID_FORMAT,
    "datetime_from_date_parsing": Reason.INVALID_FORMAT,
    "datetime_object_invalid": Reason.INVALID_FORMAT,
    BOOL_NOT_NUMBER: Reason.WRONG_TYPE,
    NULL_NOT_ALLOWED: Reason.WRONG_TYPE,
}


def _reason_for(error_type: str) -> Reason:
    reason = _REASONS.get(error_type)
    if reason is not None:
        return reason
    if error_type.endswith("_type") or error_type.endswith("_parsing") or error_type == "int_from_float":
        return Reason.WRONG_TYPE
    return Reason.INVALID


def _field_path(loc: Tuple[Union[str, int], ...]) -> str:
    return ".".join(str(part) for part in loc) or ROOT_FIELD


def field_errors(exc: PydanticValidationError) -> Tuple[FieldError, ...]:
    """Flatten a pydantic error into one FieldError per offending field."""
    out = []
    for err in exc.errors(include_url=False):
        loc = tuple(err.get("loc", ()))
        out.append(FieldError(
            field=_field_path(loc),
            reason=_reason_for(err["type"]),
            message=err.get("msg", ""),
            loc=loc,
        ))
    return tuple(out)


@dataclass(frozen=True)
class ValidationResult:
    schema: str
    value: Optional[Dict[str, Any]] = None
    model: Optional[ContractModel] = None
    errors: Tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> Dict[str, Any]:
        """Return the normalized data, or raise ValidationError listing every problem."""
        if self.errors:
            raise ValidationError(self.schema, self.errors)
        return self.value

    def as_dict(self) -> Dict[str, Any]:
        return {
            "schema": self.schema,
            "ok": self.ok,
            "value": self.value,
            "errors": [e.as_dict() for e in self.errors],
        }


class ContractRegistry:
    """Immutable lookup tables for message schemas, event envelopes and endpoints."""

    def __init__(
        self,
        messages: Mapping[str, Type[ContractModel]],
        events: Mapping[str, Type[EventEnvelope]],
        endpoints: Mapping[str, ServiceEndpoint],
    ):
        clash = set(messages) & set(events)
        if clash:
            raise ConfigurationError("registration (message/event name clash)", sorted(clash))
        for key, schema in events.items():
            declared = schema.declared_event_type()
            if declared != key:
                # cross-registration: the envelope would reject its own key
                raise ConfigurationError(f"event registration ({schema.__name__} declares {declared!r})", key)
        self.messages: Mapping[str, Type[ContractModel]] = MappingProxyType(dict(messages))
        self.events: Mapping[str, Type[EventEnvelope]] = MappingProxyType(dict(events))
        self.endpoints: Mapping[str, ServiceEndpoint] = MappingProxyType(dict(endpoints))

    @classmethod
    def default(cls) -> "ContractRegistry":
        return cls(MESSAGE_SCHEMAS, EVENT_SCHEMAS, SERVICE_ENDPOINTS)

    def _resolve(self, schema_key: SchemaKey) -> Tuple[str, Type[ContractModel]]:
        if isinstance(schema_key, type) and issubclass(schema_key, ContractModel):
            return schema_key.__name__, schema_key
        if isinstance(schema_key, EventTypes):
            schema_key = schema_key.value
        if isinstance(schema_key, str):
            schema = self.messages.get(schema_key) or self.events.get(schema_key)
            if schema is not None:
                return schema_key, schema
        logger.error("unknown schema key requested: %r", schema_key)
        raise ConfigurationError("schema", schema_key)

    def lookup_schema(self, schema_key: SchemaKey) -> Type[ContractModel]:
        return self._resolve(schema_key)[1]

    def lookup_event_schema(self, event_type: Union[EventTypes, str]) -> Type[EventEnvelope]:
        key = event_type.value if isinstance(event_type, EventTypes) else event_type
        try:
            return self.events[key]
        except (KeyError, TypeError):
            logger.error("no envelope registered for event type %r", event_type)
            raise ConfigurationError("event type", event_type) from None

    def resolve_service_url(self, service_name: Union[ServiceName, str]) -> str:
        key = service_name.value if isinstance(service_name, ServiceName) else service_name
        try:
            return self.endpoints[key].base_url
        except (KeyError, TypeError):
            logger.error("unknown service requested: %r", service_name)
            raise ConfigurationError("service", service_name) from None

    def validate(self, schema_key: SchemaKey, candidate_data: Any) -> ValidationResult:
        """Check ``candidate_data`` against the named schema.

        Unknown ``schema_key`` raises ConfigurationError. Bad data never
        raises; it yields a failed result listing every offending field.
        """
        name, schema = self._resolve(schema_key)
        try:
            model = schema.model_validate(candidate_data)
        except PydanticValidationError as exc:
            errors = field_errors(exc)
            logger.debug("%s rejected: %s", name, ", ".join(f"{e.field}={e.reason.value}" for e in errors))
            return ValidationResult(schema=name, errors=errors)
        return ValidationResult(schema=name, value=model.to_wire(), model=model)

    def validate_event(self, candidate_data: Any) -> ValidationResult:
        """Validate an event by dispatching on its own ``eventType`` field."""
        if not isinstance(candidate_data, Mapping):
            error = FieldError(ROOT_FIELD, Reason.WRONG_TYPE, "event must be an object")
            return ValidationResult(schema=EventEnvelope.__name__, errors=(error,))
        if EVENT_TYPE_FIELD not in candidate_data:
            error = FieldError(EVENT_TYPE_FIELD, Reason.MISSING, "Field required", (EVENT_TYPE_FIELD,))
            return ValidationResult(schema=EventEnvelope.__name__, errors=(error,))
        event_type = candidate_data[EVENT_TYPE_FIELD]
        if not isinstance(event_type, str):
            error = FieldError(EVENT_TYPE_FIELD, Reason.WRONG_TYPE, "Input should be a valid string", (EVENT_TYPE_FIELD,))
            return ValidationResult(schema=EventEnvelope.__name__, errors=(error,))
        if event_type not in self.events:
            allowed = ", ".join(repr(k) for k in self.events)
            error = FieldError(
                EVENT_TYPE_FIELD, Reason.NOT_IN_ENUM, f"Input should be one of {allowed}", (EVENT_TYPE_FIELD,)
            )
            return ValidationResult(schema=EventEnvelope.__name__, errors=(error,))
        return self.validate(event_type, candidate_data)

    def validate_many(self, schema_key: SchemaKey, items: Iterable[Any]) -> List[ValidationResult]:
        return [self.validate(schema_key, item) for item in items]

    def json_schema(self, schema_key: SchemaKey) -> Dict[str, Any]:
        """JSON Schema for the named contract, using wire (camelCase) names."""
        return self.lookup_schema(schema_key).model_json_schema(by_alias=True)

    def schema_names(self) -> List[str]:
        return list(self.messages) + list(self.events)


default_registry = ContractRegistry.default()


def validate(schema_key: SchemaKey, candidate_data: Any) -> ValidationResult:
    return default_registry.validate(schema_key, candidate_data)


def validate_event(candidate_data: Any) -> ValidationResult:
    return default_registry.validate_event(candidate_data)


def validate_many(schema_key: SchemaKey, items: Iterable[Any]) -> List[ValidationResult]:
    return default_registry.validate_many(schema_key, items)


def lookup_event_schema(event_type: Union[EventTypes, str]) -> Type[EventEnvelope]:
    return default_registry.lookup_event_schema(event_type)


def resolve_service_url(service_name: Union[ServiceName, str]) -> str:
    return default_registry.resolve_service_url(service_name)

"""Shared contracts for the order-processing services.

Message schemas, event envelopes, closed enumerations, example payloads and
the service endpoint table, plus a single validation entry point.
"""

from .errors import ConfigurationError, ContractError, FieldError, Reason, ValidationError
from .payloads import EXAMPLE_PAYLOADS, EXAMPLE_SCHEMAS, example_payload
from .registry import (
    ContractRegistry,
    ValidationResult,
    lookup_event_schema,
    default_registry,
    resolve_service_url,
    validate,
    validate_event,
    validate_many,
)
from .schemas import EVENT_SCHEMAS, MESSAGE_SCHEMAS, EventTypes
from .services import SERVICE_ENDPOINTS, SERVICE_PORTS, SERVICE_URLS, ServiceEndpoint, ServiceName

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError", "ContractError", "FieldError", "Reason", "ValidationError",
    "EXAMPLE_PAYLOADS", "EXAMPLE_SCHEMAS", "example_payload",
    "ContractRegistry", "ValidationResult", "default_registry", "lookup_event_schema",
    "resolve_service_url", "validate", "validate_event", "validate_many",
    "EVENT_SCHEMAS", "MESSAGE_SCHEMAS", "EventTypes",
    "SERVICE_ENDPOINTS", "SERVICE_PORTS", "SERVICE_URLS", "ServiceEndpoint", "ServiceName",
]

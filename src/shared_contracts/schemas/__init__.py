"""Contract schemas: message shapes, closed enumerations and event envelopes.

Models are strict. They enforce required fields, closed value domains and
safe defaults for every message crossing a service boundary.
"""

from .base import ContractModel, NonEmptyStr
from .enums import (
    DEFAULT_CURRENCY,
    Currency,
    DeliveryStatus,
    NotificationStatus,
    NotificationType,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    ReportType,
)
from .events import (
    EVENT_SCHEMAS,
    EventEnvelope,
    EventTypes,
    OrderCreated,
    OrderCreatedPayload,
    PaymentProcessed,
    PaymentProcessedPayload,
)
from .messages import (
    MESSAGE_SCHEMAS,
    CreateDeliveryRequest,
    CreateOrderRequest,
    CreateUserRequest,
    Delivery,
    LoginRequest,
    LoginResponse,
    Metric,
    Notification,
    NotificationRequest,
    Order,
    OrderItem,
    Payment,
    PaymentRequest,
    Report,
    User,
    ValidateRequest,
    ValidateResponse,
)

__all__ = [
    "ContractModel", "NonEmptyStr",
    "DEFAULT_CURRENCY", "Currency", "DeliveryStatus", "NotificationStatus", "NotificationType",
    "OrderStatus", "PaymentMethod", "PaymentStatus", "ReportType",
    "EVENT_SCHEMAS", "EventEnvelope", "EventTypes", "OrderCreated", "OrderCreatedPayload",
    "PaymentProcessed", "PaymentProcessedPayload",
    "MESSAGE_SCHEMAS", "CreateDeliveryRequest", "CreateOrderRequest", "CreateUserRequest", "Delivery",
    "LoginRequest", "LoginResponse", "Metric", "Notification", "NotificationRequest", "Order",
    "OrderItem", "Payment", "PaymentRequest", "Report", "User", "ValidateRequest", "ValidateResponse",
]

"""Domain event envelopes.

Every envelope carries identity, a fixed type tag, a timestamp and a typed
payload. The ``event_type`` literal of each envelope must match the key it is
registered under in ``EVENT_SCHEMAS``.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Literal

from pydantic import Field

from .base import ContractModel, NonEmptyStr, Number
from .messages import OrderItem


class EventTypes(str, Enum):
    # order events
    ORDER_CREATED = "OrderCreated"
    ORDER_UPDATED = "OrderUpdated"
    ORDER_CANCELLED = "OrderCancelled"
    # payment events
    PAYMENT_PROCESSED = "PaymentProcessed"
    PAYMENT_FAILED = "PaymentFailed"
    # user events
    USER_CREATED = "UserCreated"
    USER_UPDATED = "UserUpdated"
    # notification events
    NOTIFICATION_SENT = "NotificationSent"
    NOTIFICATION_FAILED = "NotificationFailed"


class EventEnvelope(ContractModel):
    event_id: NonEmptyStr
    event_type: str
    timestamp: datetime

    @classmethod
    def declared_event_type(cls) -> str:
        """The literal tag this envelope accepts for ``eventType``."""
        annotation = cls.model_fields["event_type"].annotation
        args = getattr(annotation, "__args__", ())
        if len(args) != 1:
            raise TypeError(f"{cls.__name__}.event_type must be a single Literal")
        return args[0]


class OrderCreatedPayload(ContractModel):
    order_id: NonEmptyStr
    user_id: NonEmptyStr
    total_amount: Number = Field(..., gt=0)
    items: List[OrderItem]


class OrderCreated(EventEnvelope):
    event_type: Literal["OrderCreated"]
    payload: OrderCreatedPayload


class PaymentProcessedPayload(ContractModel):
    payment_id: NonEmptyStr
    order_id: NonEmptyStr
    status: Literal["completed", "failed"]
    amount: Number = Field(..., gt=0)


class PaymentProcessed(EventEnvelope):
    event_type: Literal["PaymentProcessed"]
    payload: PaymentProcessedPayload


EVENT_SCHEMAS = {
    EventTypes.ORDER_CREATED.value: OrderCreated,
    EventTypes.PAYMENT_PROCESSED.value: PaymentProcessed,
}

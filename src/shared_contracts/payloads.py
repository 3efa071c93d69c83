"""Literal example payloads, one per major message kind.

Used for documentation and contract tests. Each example is paired with the
registry key of the schema it satisfies in ``EXAMPLE_SCHEMAS``.
"""
from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .errors import ConfigurationError

_ORDER_ITEM = {
    "productId": "prod-001",
    "quantity": 2,
    "unitPrice": 29.99,
}

EXAMPLE_PAYLOADS: Mapping[str, Dict[str, Any]] = MappingProxyType({
    "loginRequest": {
        "username": "john_doe",
        "password": "securePassword123",
    },
    "loginResponse": {
        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "userId": "usr-001",
        "expiresAt": "2024-12-31T23:59:59Z",
    },
    "validateRequest": {
        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    },
    "validateResponse": {
        "valid": True,
        "userId": "usr-001",
    },
    "user": {
        "id": "usr-001",
        "username": "john_doe",
        "email": "john@example.com",
        "fullName": "John Doe",
        "createdAt": "2024-01-15T10:30:00Z",
    },
    "createUserRequest": {
        "username": "john_doe",
        "email": "john@example.com",
        "fullName": "John Doe",
    },
    "createOrderRequest": {
        "userId": "usr-001",
        "items": [dict(_ORDER_ITEM)],
    },
    "order": {
        "id": "ord-001",
        "userId": "usr-001",
        "items": [dict(_ORDER_ITEM)],
        "totalAmount": 59.98,
        "status": "pending",
        "createdAt": "2024-01-20T14:30:00Z",
    },
    "paymentRequest": {
        "orderId": "ord-001",
        "amount": 59.98,
        "currency": "USD",
        "paymentMethod": "card",
    },
    "payment": {
        "id": "pay-001",
        "orderId": "ord-001",
        "amount": 59.98,
        "currency": "USD",
        "status": "completed",
        "processedAt": "2024-01-20T14:31:00Z",
    },
    "notificationRequest": {
        "userId": "usr-001",
        "type": "email",
        "subject": "Order confirmed",
        "message": "Your order ord-001 has been confirmed.",
    },
    "notification": {
        "id": "ntf-001",
        "userId": "usr-001",
        "type": "email",
        "subject": "Order confirmed",
        "message": "Your order ord-001 has been confirmed.",
        "status": "sent",
        "sentAt": "2024-01-20T14:32:00Z",
    },
    "metric": {
        "service": "order-service",
        "metric": "orders_created",
        "value": 1,
        "timestamp": "2024-01-20T14:30:00Z",
        "tags": {"region": "us-east"},
    },
    "report": {
        "id": "rpt-001",
        "type": "daily",
        "generatedAt": "2024-01-21T00:00:00Z",
        "data": {"ordersCreated": 1, "revenue": 59.98},
    },
    "delivery": {
        "id": "dlv-001",
        "orderId": "ord-001",
        "address": "1 Main Street, Springfield",
        "status": "pending",
        "estimatedDelivery": "2024-01-25T12:00:00Z",
        "createdAt": "2024-01-20T14:35:00Z",
    },
    "createDeliveryRequest": {
        "orderId": "ord-001",
        "address": "1 Main Street, Springfield",
    },
    "orderCreated": {
        "eventId": "evt-001",
        "eventType": "OrderCreated",
        "timestamp": "2024-01-20T14:30:00Z",
        "payload": {
            "orderId": "ord-001",
            "userId": "usr-001",
            "totalAmount": 59.98,
            "items": [dict(_ORDER_ITEM)],
        },
    },
    "paymentProcessed": {
        "eventId": "evt-002",
        "eventType": "PaymentProcessed",
        "timestamp": "2024-01-20T14:31:00Z",
        "payload": {
            "paymentId": "pay-001",
            "orderId": "ord-001",
            "status": "completed",
            "amount": 59.98,
        },
    },
})

EXAMPLE_SCHEMAS: Mapping[str, str] = MappingProxyType({
    "loginRequest": "LoginRequest",
    "loginResponse": "LoginResponse",
    "validateRequest": "ValidateRequest",
    "validateResponse": "ValidateResponse",
    "user": "User",
    "createUserRequest": "CreateUserRequest",
    "createOrderRequest": "CreateOrderRequest",
    "order": "Order",
    "paymentRequest": "PaymentRequest",
    "payment": "Payment",
    "notificationRequest": "NotificationRequest",
    "notification": "Notification",
    "metric": "Metric",
    "report": "Report",
    "delivery": "Delivery",
    "createDeliveryRequest": "CreateDeliveryRequest",
    "orderCreated": "OrderCreated",
    "paymentProcessed": "PaymentProcessed",
})


def example_payload(name: str) -> Dict[str, Any]:
    """Return a private deep copy of the named example."""
    try:
        return copy.deepcopy(EXAMPLE_PAYLOADS[name])
    except KeyError:
        raise ConfigurationError("example payload", name) from None

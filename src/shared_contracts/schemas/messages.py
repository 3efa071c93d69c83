"""Message schemas exchanged between services, grouped by owning service."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from pydantic import EmailStr, Field

from .base import (
    ContractModel,
    Flag,
    NonEmptyStr,
    Number,
    OptionalDatetime,
    OptionalObject,
    OptionalStr,
    WholeNumber,
)
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


# auth service

class LoginRequest(ContractModel):
    username: NonEmptyStr
    password: NonEmptyStr


class LoginResponse(ContractModel):
    token: NonEmptyStr
    user_id: NonEmptyStr
    expires_at: datetime


class ValidateRequest(ContractModel):
    token: NonEmptyStr


class ValidateResponse(ContractModel):
    valid: Flag
    user_id: OptionalStr = None


# user service

class User(ContractModel):
    id: NonEmptyStr
    username: NonEmptyStr
    email: EmailStr
    full_name: NonEmptyStr
    created_at: datetime


class CreateUserRequest(ContractModel):
    username: NonEmptyStr
    email: EmailStr
    full_name: NonEmptyStr


# order service

class OrderItem(ContractModel):
    product_id: NonEmptyStr
    quantity: WholeNumber = Field(..., ge=1)
    unit_price: Number = Field(..., gt=0)


class Order(ContractModel):
    id: NonEmptyStr
    user_id: NonEmptyStr
    items: List[OrderItem]
    total_amount: Number = Field(..., gt=0)
    status: OrderStatus
    payment_id: OptionalStr = None
    created_at: datetime


class CreateOrderRequest(ContractModel):
    user_id: NonEmptyStr
    items: List[OrderItem] = Field(..., min_length=1)


# payment service

class PaymentRequest(ContractModel):
    order_id: NonEmptyStr
    amount: Number = Field(..., gt=0)
    currency: Currency = DEFAULT_CURRENCY
    payment_method: PaymentMethod


class Payment(ContractModel):
    id: NonEmptyStr
    order_id: NonEmptyStr
    amount: Number = Field(..., gt=0)
    # free-form, unlike PaymentRequest.currency
    currency: NonEmptyStr
    status: PaymentStatus
    processed_at: OptionalDatetime = None


# notification service

class NotificationRequest(ContractModel):
    user_id: NonEmptyStr
    type: NotificationType
    subject: NonEmptyStr
    message: NonEmptyStr


class Notification(ContractModel):
    id: NonEmptyStr
    user_id: NonEmptyStr
    type: NonEmptyStr
    subject: NonEmptyStr
    message: NonEmptyStr
    status: NotificationStatus
    sent_at: OptionalDatetime = None


# analytics service

class Metric(ContractModel):
    service: NonEmptyStr
    metric: NonEmptyStr
    value: Number
    timestamp: datetime
    tags: OptionalObject = None


class Report(ContractModel):
    id: NonEmptyStr
    type: ReportType
    generated_at: datetime
    data: Dict[str, Any]


# delivery service

class Delivery(ContractModel):
    id: NonEmptyStr
    order_id: NonEmptyStr
    address: NonEmptyStr
    status: DeliveryStatus
    estimated_delivery: datetime
    created_at: datetime


class CreateDeliveryRequest(ContractModel):
    order_id: NonEmptyStr
    address: NonEmptyStr
    estimated_delivery: OptionalDatetime = None


MESSAGE_SCHEMAS = {
    "LoginRequest": LoginRequest,
    "LoginResponse": LoginResponse,
    "ValidateRequest": ValidateRequest,
    "ValidateResponse": ValidateResponse,
    "User": User,
    "CreateUserRequest": CreateUserRequest,
    "Order": Order,
    "CreateOrderRequest": CreateOrderRequest,
    "OrderItem": OrderItem,
    "Payment": Payment,
    "PaymentRequest": PaymentRequest,
    "Notification": Notification,
    "NotificationRequest": NotificationRequest,
    "Metric": Metric,
    "Report": Report,
    "Delivery": Delivery,
    "CreateDeliveryRequest": CreateDeliveryRequest,
}

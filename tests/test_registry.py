import json

import pytest

from shared_contracts import (
    ConfigurationError,
    ContractRegistry,
    EventTypes,
    Reason,
    ValidationError,
    lookup_event_schema,
    validate,
    validate_event,
    validate_many,
)
from shared_contracts.schemas import EVENT_SCHEMAS, MESSAGE_SCHEMAS, OrderCreated, OrderItem, PaymentProcessed
from shared_contracts.services import SERVICE_ENDPOINTS


def _by_field(result):
    return {e.field: e.reason for e in result.errors}


def test_validate_success_returns_normalized_data(example):
    res = validate("CreateOrderRequest", example("createOrderRequest"))
    assert res.ok
    assert res.errors == ()
    assert res.schema == "CreateOrderRequest"
    assert res.value == example("createOrderRequest")
    assert res.model.user_id == "usr-001"


def test_validate_applies_currency_default(example):
    data = example("paymentRequest")
    del data["currency"]
    res = validate("PaymentRequest", data)
    assert res.ok
    assert res.value["currency"] == "USD"


def test_validate_renders_datetimes_as_iso(example):
    res = validate("LoginResponse", example("loginResponse"))
    assert res.ok
    assert res.value["expiresAt"].startswith("2024-12-31T23:59:59")


def test_validate_lists_every_problem():
    res = validate("LoginRequest", {})
    assert not res.ok
    assert _by_field(res) == {"username": Reason.MISSING, "password": Reason.MISSING}


def test_validate_reports_nested_paths():
    res = validate("CreateOrderRequest", {
        "userId": "usr-001",
        "items": [{"productId": "p", "quantity": 0, "unitPrice": "abc"}],
    })
    assert _by_field(res) == {
        "items.0.quantity": Reason.OUT_OF_RANGE,
        "items.0.unitPrice": Reason.WRONG_TYPE,
    }


@pytest.mark.parametrize(
    "schema,patch,field,reason",
    [
        ("LoginRequest", {"username": 42}, "username", Reason.WRONG_TYPE),
        ("LoginRequest", {"username": ""}, "username", Reason.EMPTY),
        ("LoginRequest", {"otp": "123"}, "otp", Reason.NOT_ALLOWED),
        ("CreateUserRequest", {"email": "john.example.com"}, "email", Reason.INVALID_FORMAT),
        ("LoginResponse", {"expiresAt": "next tuesday"}, "expiresAt", Reason.INVALID_FORMAT),
        ("PaymentRequest", {"amount": -5}, "amount", Reason.OUT_OF_RANGE),
        ("PaymentRequest", {"paymentMethod": "cash"}, "paymentMethod", Reason.NOT_IN_ENUM),
        ("CreateOrderRequest", {"items": []}, "items", Reason.OUT_OF_RANGE),
        ("CreateOrderRequest", {"items": "prod-001"}, "items", Reason.WRONG_TYPE),
        # booleans are not numbers
        ("CreateOrderRequest", {"items": [{"productId": "p", "quantity": True, "unitPrice": 1.0}]}, "items.0.quantity", Reason.WRONG_TYPE),
        ("CreateOrderRequest", {"items": [{"productId": "p", "quantity": 1, "unitPrice": True}]}, "items.0.unitPrice", Reason.WRONG_TYPE),
        ("PaymentRequest", {"amount": True}, "amount", Reason.WRONG_TYPE),
        ("Metric", {"value": False}, "value", Reason.WRONG_TYPE),
        # non-finite numbers
        ("PaymentRequest", {"amount": float("inf")}, "amount", Reason.OUT_OF_RANGE),
        ("PaymentRequest", {"amount": "Infinity"}, "amount", Reason.OUT_OF_RANGE),
        ("PaymentRequest", {"amount": float("nan")}, "amount", Reason.OUT_OF_RANGE),
        ("Metric", {"value": float("nan")}, "value", Reason.OUT_OF_RANGE),
        ("Metric", {"value": float("-inf")}, "value", Reason.OUT_OF_RANGE),
        # booleans are not coerced from numbers or words
        ("ValidateResponse", {"valid": "yes"}, "valid", Reason.WRONG_TYPE),
        ("ValidateResponse", {"valid": 1}, "valid", Reason.WRONG_TYPE),
        # optional fields may be omitted, not null
        ("ValidateResponse", {"userId": None}, "userId", Reason.WRONG_TYPE),
        ("Order", {"paymentId": None}, "paymentId", Reason.WRONG_TYPE),
        ("Payment", {"processedAt": None}, "processedAt", Reason.WRONG_TYPE),
        ("Notification", {"sentAt": None}, "sentAt", Reason.WRONG_TYPE),
        ("Metric", {"tags": None}, "tags", Reason.WRONG_TYPE),
        ("CreateDeliveryRequest", {"estimatedDelivery": None}, "estimatedDelivery", Reason.WRONG_TYPE),
    ],
)
def test_validate_reason_mapping(example, schema, patch, field, reason):
    names = {
        "LoginRequest": "loginRequest",
        "CreateUserRequest": "createUserRequest",
        "LoginResponse": "loginResponse",
        "PaymentRequest": "paymentRequest",
        "CreateOrderRequest": "createOrderRequest",
        "Metric": "metric",
        "ValidateResponse": "validateResponse",
        "Order": "order",
        "Payment": "payment",
        "Notification": "notification",
        "CreateDeliveryRequest": "createDeliveryRequest",
    }
    data = example(names[schema])
    data.update(patch)
    res = validate(schema, data)
    assert not res.ok
    assert _by_field(res).get(field) == reason


def test_validate_non_object_is_root_type_error():
    res = validate("LoginRequest", ["john_doe", "pw"])
    assert [(e.field, e.reason) for e in res.errors] == [("(root)", Reason.WRONG_TYPE)]


def test_validate_accepts_schema_class(example):
    res = validate(OrderItem, example("createOrderRequest")["items"][0])
    assert res.ok
    assert res.schema == "OrderItem"


def test_validate_accepts_event_type_key(example):
    assert validate("OrderCreated", example("orderCreated")).ok
    assert validate(EventTypes.PAYMENT_PROCESSED, example("paymentProcessed")).ok


def test_unknown_schema_is_configuration_error():
    with pytest.raises(ConfigurationError):
        validate("CreateInvoiceRequest", {})
    with pytest.raises(ConfigurationError):
        validate(dict, {})


def test_configuration_error_is_not_validation_error():
    with pytest.raises(ConfigurationError) as excinfo:
        validate("Nope", {})
    assert not isinstance(excinfo.value, ValidationError)
    assert isinstance(excinfo.value, LookupError)


def test_raise_for_errors():
    ok = validate("ValidateRequest", {"token": "abc"})
    assert ok.raise_for_errors() == {"token": "abc"}

    bad = validate("ValidateRequest", {})
    with pytest.raises(ValidationError) as excinfo:
        bad.raise_for_errors()
    assert excinfo.value.fields == ("token",)
    assert excinfo.value.errors[0].reason is Reason.MISSING
    assert excinfo.value.schema == "ValidateRequest"


def test_result_as_dict():
    res = validate("ValidateRequest", {})
    out = res.as_dict()
    assert out["ok"] is False
    assert out["errors"][0]["field"] == "token"
    assert out["errors"][0]["reason"] == "missing"


def test_validate_many(example):
    results = validate_many("LoginRequest", [example("loginRequest"), {"username": "x"}])
    assert [r.ok for r in results] == [True, False]


def test_order_created_accepts_example_and_rejects_other_types(example):
    assert validate("OrderCreated", example("orderCreated")).ok
    for other in ["PaymentProcessed", "OrderUpdated", "orderCreated", "", "OrderCreated "]:
        data = example("orderCreated")
        data["eventType"] = other
        res = validate(EVENT_SCHEMAS["OrderCreated"], data)
        assert not res.ok
        assert _by_field(res)["eventType"] is Reason.NOT_IN_ENUM


def test_validate_event_dispatches_on_event_type(example):
    res = validate_event(example("paymentProcessed"))
    assert res.ok
    assert res.schema == "PaymentProcessed"
    assert isinstance(res.model, PaymentProcessed)


def test_validate_event_unknown_or_missing_type(example):
    data = example("orderCreated")
    data["eventType"] = "OrderShipped"
    res = validate_event(data)
    assert _by_field(res) == {"eventType": Reason.NOT_IN_ENUM}

    del data["eventType"]
    assert _by_field(validate_event(data)) == {"eventType": Reason.MISSING}

    assert _by_field(validate_event("OrderCreated")) == {"(root)": Reason.WRONG_TYPE}


def test_lookup_event_schema():
    assert lookup_event_schema("OrderCreated") is OrderCreated
    assert lookup_event_schema(EventTypes.PAYMENT_PROCESSED) is PaymentProcessed


def test_lookup_event_schema_without_envelope():
    # declared event type with no registered envelope
    with pytest.raises(ConfigurationError):
        lookup_event_schema(EventTypes.USER_CREATED)
    with pytest.raises(ConfigurationError):
        lookup_event_schema("OrderShipped")


def test_cross_registration_rejected():
    with pytest.raises(ConfigurationError):
        ContractRegistry(messages={}, events={"PaymentProcessed": OrderCreated}, endpoints={})


def test_message_event_name_clash_rejected():
    with pytest.raises(ConfigurationError):
        ContractRegistry(messages={"OrderCreated": OrderItem}, events=EVENT_SCHEMAS, endpoints={})


def test_registry_tables_are_read_only(registry):
    with pytest.raises(TypeError):
        registry.messages["Evil"] = OrderItem
    with pytest.raises(TypeError):
        registry.events["Evil"] = OrderCreated


def test_schema_names(registry):
    names = registry.schema_names()
    assert set(names) == set(MESSAGE_SCHEMAS) | set(EVENT_SCHEMAS)


def test_json_schema_uses_wire_names(registry):
    schema = registry.json_schema("CreateOrderRequest")
    assert set(schema["required"]) == {"userId", "items"}
    assert "userId" in schema["properties"]
    assert schema["additionalProperties"] is False


def test_custom_registry_uses_its_own_endpoints():
    reg = ContractRegistry(messages=MESSAGE_SCHEMAS, events={}, endpoints={"AUTH_SERVICE": SERVICE_ENDPOINTS["AUTH_SERVICE"]})
    assert reg.resolve_service_url("AUTH_SERVICE") == "http://localhost:3001"
    with pytest.raises(ConfigurationError):
        reg.resolve_service_url("ORDER_SERVICE")


def test_validate_event_non_string_type_is_wrong_type(example):
    for bad in (5, None, ["OrderCreated"]):
        data = example("orderCreated")
        data["eventType"] = bad
        assert _by_field(validate_event(data)) == {"eventType": Reason.WRONG_TYPE}


def test_validated_numbers_are_json_safe(example):
    res = validate("Metric", example("metric"))
    assert res.ok
    # strict JSON: no Infinity/NaN tokens
    json.dumps(res.value, allow_nan=False)

"""E2E journey of a client registering, reading, updating and deleting
a customer against a running server."""

from __future__ import annotations

import json
from uuid import uuid4

import pytest

pytestmark = [pytest.mark.e2e]

CUSTOMER_URI = "/api/v1/customer"
JSON_HEADERS = {"Content-Type": "application/json"}


def _register(api_request_context, **payload):
    return api_request_context.post(
        CUSTOMER_URI, data=json.dumps(payload), headers=JSON_HEADERS
    )


def _find_by_email(api_request_context, email: str) -> dict:
    response = api_request_context.get(CUSTOMER_URI)
    assert response.status == 200
    return next(c for c in response.json() if c["email"] == email)


def test_can_register_a_customer(api_request_context):
    email = f"e2e-{uuid4().hex[:8]}@gmail.com"

    response = _register(api_request_context, name="Test name", email=email, age=3)
    assert response.status == 200

    customer = _find_by_email(api_request_context, email)
    retrieved = api_request_context.get(f"{CUSTOMER_URI}/{customer['id']}")

    assert retrieved.status == 200
    assert retrieved.json() == {
        "id": customer["id"],
        "name": "Test name",
        "email": email,
        "age": 3,
    }

    api_request_context.delete(f"{CUSTOMER_URI}/{customer['id']}")


def test_can_delete_customer(api_request_context):
    email = f"e2e-{uuid4().hex[:8]}@gmail.com"
    _register(api_request_context, name="Test name", email=email, age=3)
    customer = _find_by_email(api_request_context, email)

    deleted = api_request_context.delete(f"{CUSTOMER_URI}/{customer['id']}")
    missing = api_request_context.get(f"{CUSTOMER_URI}/{customer['id']}")

    assert deleted.status == 200
    assert missing.status == 404


def test_can_update_customer(api_request_context):
    email = f"e2e-{uuid4().hex[:8]}@gmail.com"
    _register(api_request_context, name="Test name", email=email, age=3)
    customer = _find_by_email(api_request_context, email)
    customer_uri = f"{CUSTOMER_URI}/{customer['id']}"

    updated = api_request_context.put(
        customer_uri, data=json.dumps({"name": "Ali"}), headers=JSON_HEADERS
    )
    unchanged = api_request_context.put(
        customer_uri, data=json.dumps({"name": "Ali"}), headers=JSON_HEADERS
    )

    assert updated.status == 200
    assert updated.json()["name"] == "Ali"
    assert updated.json()["email"] == email
    assert unchanged.status == 400

    api_request_context.delete(customer_uri)

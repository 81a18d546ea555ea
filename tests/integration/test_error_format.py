"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


def _assert_standard_format(data, expected_type):
    assert data["type"] == expected_type
    assert isinstance(data["errors"], list)
    assert data["errors"]
    for error in data["errors"]:
        assert {"code", "detail", "attr"} <= set(error)


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/customer/424242")
        assert response.status_code == 404
        _assert_standard_format(response.json(), "client_error")

    def test_conflict_has_standard_format(self, api_client):
        payload = {"name": "Alex", "email": "alex@gmail.com", "age": 11}
        api_client.post("/api/v1/customer", payload, format="json")
        response = api_client.post("/api/v1/customer", payload, format="json")
        assert response.status_code == 409
        _assert_standard_format(response.json(), "client_error")

    def test_validation_error_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/v1/customer",
            {"name": "Alex", "email": "alex@gmail.com", "age": -1},
            format="json",
        )
        assert response.status_code == 400
        _assert_standard_format(response.json(), "validation_error")

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.generic(
            "POST", "/api/v1/customer", "{", content_type="application/json"
        )
        assert response.status_code == 400
        _assert_standard_format(response.json(), "client_error")

"""Unit tests for Customer DRF serializers."""

from __future__ import annotations

import pytest

from modules.customers.entities import CustomerRecord
from modules.customers.models import Customer
from modules.customers.serializers import CustomerSerializer

pytestmark = pytest.mark.unit


class TestCustomerSerializer:
    def test_expected_fields(self):
        assert set(CustomerSerializer().fields) == {"id", "name", "email", "age"}

    def test_all_fields_read_only(self):
        assert all(f.read_only for f in CustomerSerializer().fields.values())

    def test_serializes_record(self):
        record = CustomerRecord(id=3, name="Alex", email="alex@gmail.com", age=11)
        assert CustomerSerializer(record).data == {
            "id": 3,
            "name": "Alex",
            "email": "alex@gmail.com",
            "age": 11,
        }

    def test_serializes_many(self):
        records = [
            CustomerRecord(id=1, name="Alex", email="alex@gmail.com", age=11),
            CustomerRecord(id=2, name="Jamila", email="jamila@gmail.com", age=22),
        ]
        data = CustomerSerializer(records, many=True).data
        assert [item["id"] for item in data] == [1, 2]


class TestCustomerModel:
    def test_to_record(self):
        row = Customer.objects.create(name="Alex", email="alex@gmail.com", age=11)
        assert row.to_record() == CustomerRecord(
            id=row.id, name="Alex", email="alex@gmail.com", age=11
        )

    def test_str(self):
        row = Customer.objects.create(name="Alex", email="alex@gmail.com", age=11)
        assert str(row) == f"Alex (#{row.id})"

    def test_table_name(self):
        assert Customer._meta.db_table == "customer"

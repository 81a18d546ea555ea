"""Unit tests for the ``seed_customers`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.customers.models import Customer

pytestmark = pytest.mark.unit


def _seed(*args) -> str:
    out = StringIO()
    call_command("seed_customers", *args, stdout=out)
    return out.getvalue()


class TestSeedCustomers:
    def test_seeds_default_customers(self):
        output = _seed()

        assert set(Customer.objects.values_list("email", flat=True)) == {
            "alex@gmail.com",
            "jamila@gmail.com",
        }
        assert "customers=2, skipped=0" in output

    def test_second_run_skips_existing(self):
        _seed()
        output = _seed()

        assert Customer.objects.count() == 2
        assert "customers=0, skipped=2" in output

    def test_random_customers(self):
        _seed("--random", "3", "--seed", "42")

        randoms = Customer.objects.exclude(
            email__in=["alex@gmail.com", "jamila@gmail.com"]
        )
        assert randoms.count() == 3
        for customer in randoms:
            assert 16 <= customer.age <= 98
            assert customer.email.endswith("@gmail.com")

    def test_uses_configured_backend(self, settings):
        settings.CUSTOMER_REPOSITORY = "memory"
        from modules.customers.repositories import get_customer_repository

        _seed()

        assert Customer.objects.count() == 0
        assert len(get_customer_repository().list()) == 2

"""Relational layout of the ``customer`` table.

The ``UNIQUE`` constraint on ``email`` backs the service-level duplicate
check: when two registrations race past the check, the database rejects
the second write and the repository reports it as a duplicate.
"""

from __future__ import annotations

from django.db import models

from modules.customers.entities import CustomerRecord


class Customer(models.Model):
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    age = models.PositiveIntegerField()

    class Meta:
        db_table = "customer"
        ordering = ["id"]

    def to_record(self) -> CustomerRecord:
        return CustomerRecord(id=self.id, name=self.name, email=self.email, age=self.age)

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"

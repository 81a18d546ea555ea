"""Customer DRF serializers for API output and schema generation.

Request bodies are validated by the Pydantic DTOs in ``dtos.py``;
the input serializers below only describe those bodies to
drf-spectacular.  ``CustomerSerializer`` renders a ``CustomerRecord``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.dtos import MAX_AGE


class CustomerSerializer(serializers.Serializer):
    """Read-only representation of a stored customer."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    age = serializers.IntegerField(read_only=True)


class CustomerRegistrationSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    age = serializers.IntegerField(min_value=1, max_value=MAX_AGE)


class CustomerUpdateSerializer(serializers.Serializer):
    """Every field is optional; omitted or null fields are left unchanged."""

    name = serializers.CharField(max_length=255, required=False, allow_null=True)
    email = serializers.EmailField(required=False, allow_null=True)
    age = serializers.IntegerField(
        min_value=1, max_value=MAX_AGE, required=False, allow_null=True
    )

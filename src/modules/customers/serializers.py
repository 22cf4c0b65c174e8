"""Customer DRF serializers (output only).

Input is validated by the Pydantic DTOs in ``dtos.py``; these serializers
render model instances with the Portuguese wire names.  The secret hash is
never exposed.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer, Interest


class CustomerSerializer(serializers.ModelSerializer):
    nome = serializers.CharField(source="name", read_only=True)
    endereco = serializers.CharField(source="address", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)
    atualizado_em = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Customer
        fields = ["id", "nome", "endereco", "criado_em", "atualizado_em"]
        read_only_fields = fields


class InterestSerializer(serializers.ModelSerializer):
    cliente_id = serializers.UUIDField(source="customer_id", read_only=True)
    sabor_id = serializers.UUIDField(source="flavor_id", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Interest
        fields = ["id", "cliente_id", "sabor_id", "criado_em"]
        read_only_fields = fields

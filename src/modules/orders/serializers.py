"""Order DRF serializers (output only).

Input is validated by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order


class OrderSerializer(serializers.ModelSerializer):
    cliente_id = serializers.UUIDField(source="customer_id", read_only=True)
    sabor_id = serializers.UUIDField(source="flavor_id", read_only=True)
    sabor = serializers.CharField(source="flavor.name", read_only=True)
    estabelecimento_id = serializers.UUIDField(source="flavor.establishment_id", read_only=True)
    entregador_id = serializers.UUIDField(source="courier_id", read_only=True, allow_null=True)
    quantidade = serializers.IntegerField(source="quantity", read_only=True)
    endereco_entrega = serializers.CharField(source="delivery_address", read_only=True)
    metodo_pagamento = serializers.CharField(source="payment_method", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)
    atualizado_em = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "cliente_id",
            "sabor_id",
            "sabor",
            "estabelecimento_id",
            "entregador_id",
            "quantidade",
            "endereco_entrega",
            "metodo_pagamento",
            "status",
            "criado_em",
            "atualizado_em",
        ]
        read_only_fields = fields

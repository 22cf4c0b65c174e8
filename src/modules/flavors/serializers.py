"""Flavor DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.flavors.models import Flavor


class FlavorSerializer(serializers.ModelSerializer):
    estabelecimento_id = serializers.UUIDField(source="establishment_id", read_only=True)
    nome = serializers.CharField(source="name", read_only=True)
    categoria = serializers.CharField(source="category", read_only=True)
    preco_medio = serializers.DecimalField(
        source="price_medium", max_digits=8, decimal_places=2, read_only=True
    )
    preco_grande = serializers.DecimalField(
        source="price_large", max_digits=8, decimal_places=2, read_only=True
    )
    disponivel = serializers.BooleanField(source="is_available", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Flavor
        fields = [
            "id",
            "estabelecimento_id",
            "nome",
            "categoria",
            "preco_medio",
            "preco_grande",
            "disponivel",
            "criado_em",
        ]
        read_only_fields = fields

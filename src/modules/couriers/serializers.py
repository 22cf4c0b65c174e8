"""Courier DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.couriers.models import Courier


class CourierSerializer(serializers.ModelSerializer):
    nome = serializers.CharField(source="name", read_only=True)
    placa_veiculo = serializers.CharField(source="vehicle_plate", read_only=True)
    tipo_veiculo = serializers.CharField(source="vehicle_type", read_only=True)
    cor_veiculo = serializers.CharField(source="vehicle_color", read_only=True)
    disponivel = serializers.BooleanField(source="is_available", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)
    atualizado_em = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Courier
        fields = [
            "id",
            "nome",
            "placa_veiculo",
            "tipo_veiculo",
            "cor_veiculo",
            "disponivel",
            "criado_em",
            "atualizado_em",
        ]
        read_only_fields = fields

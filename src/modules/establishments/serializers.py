"""Establishment DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.establishments.models import CourierAssociation, Establishment


class EstablishmentSerializer(serializers.ModelSerializer):
    nome = serializers.CharField(source="name", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)
    atualizado_em = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Establishment
        fields = ["id", "nome", "criado_em", "atualizado_em"]
        read_only_fields = fields


class CourierAssociationSerializer(serializers.ModelSerializer):
    entregador_id = serializers.UUIDField(source="courier_id", read_only=True)
    estabelecimento_id = serializers.UUIDField(source="establishment_id", read_only=True)
    aprovado = serializers.BooleanField(source="is_approved", read_only=True)
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = CourierAssociation
        fields = [
            "id",
            "entregador_id",
            "estabelecimento_id",
            "status",
            "aprovado",
            "criado_em",
        ]
        read_only_fields = fields

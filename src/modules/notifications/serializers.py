"""Notification DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    mensagem = serializers.CharField(source="message", read_only=True)
    cliente_id = serializers.UUIDField(source="customer_id", read_only=True, allow_null=True)
    estabelecimento_id = serializers.UUIDField(
        source="establishment_id", read_only=True, allow_null=True
    )
    criado_em = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Notification
        fields = ["id", "mensagem", "cliente_id", "estabelecimento_id", "criado_em"]
        read_only_fields = fields

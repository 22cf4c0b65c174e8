"""Cross-module constants."""

from django.db import models


class Role(models.TextChoices):
    CUSTOMER = "cliente", "Cliente"
    ESTABLISHMENT = "estabelecimento", "Estabelecimento"
    COURIER = "entregador", "Entregador"


INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"

# Same pattern as Django's ``<uuid:>`` converter, so both route styles
# accept exactly the same ids.
UUID_PATH_REGEX = "[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

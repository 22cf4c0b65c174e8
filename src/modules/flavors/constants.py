from django.db import models


class FlavorCategory(models.TextChoices):
    SAVORY = "salgada", "Salgada"
    SWEET = "doce", "Doce"

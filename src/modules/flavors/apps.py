from django.apps import AppConfig


class FlavorsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.flavors"
    label = "flavors"

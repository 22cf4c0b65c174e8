import django_filters

from modules.flavors.constants import FlavorCategory
from modules.flavors.models import Flavor


class FlavorFilter(django_filters.FilterSet):
    estabelecimento = django_filters.UUIDFilter(field_name="establishment_id")
    categoria = django_filters.ChoiceFilter(field_name="category", choices=FlavorCategory.choices)
    disponivel = django_filters.BooleanFilter(field_name="is_available")
    nome = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Flavor
        fields = ["estabelecimento", "categoria", "disponivel", "nome"]

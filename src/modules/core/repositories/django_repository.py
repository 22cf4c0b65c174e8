"""Django ORM implementation shared by the principal repositories.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a missing
entity into a domain error.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.models import PrincipalModel
from modules.core.pagination import Page, PageRequest, paginate
from modules.core.repositories.interfaces import IPrincipalRepository

logger = structlog.get_logger(__name__)

P = TypeVar("P", bound=PrincipalModel)


class PrincipalDjangoRepository(IPrincipalRepository[P], Generic[P]):
    """Concrete principal repository; subclasses only set ``model``."""

    model: Type[P]

    def build(self, **fields: Any) -> P:
        return self.model(**fields)

    def get_by_id(self, id: str) -> Optional[P]:
        """Returns ``None`` for non-existent or malformed IDs."""
        try:
            return self.model.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[P]:
        return self.model.objects.filter(name=name).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[P]:
        queryset = self.model.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def page(self, request: PageRequest) -> Page[P]:
        return paginate(self.model.objects.order_by("created_at", "id"), request)

    @transaction.atomic
    def save(self, entity: P) -> P:
        is_new = entity._state.adding
        entity.save()
        logger.info(
            f"{entity.role}.saved",
            principal_id=str(entity.id),
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Returns ``False`` if no principal exists with the given ID."""
        principal = self.get_by_id(id)
        if not principal:
            return False
        principal.delete()
        logger.info(f"{principal.role}.deleted", principal_id=str(id))
        return True

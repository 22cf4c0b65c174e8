"""Generic repository interfaces (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend, and ``IPrincipalRepository[T]``
for the three authenticatable kinds.  Service-layer code depends on these
abstractions, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from modules.core.pagination import Page, PageRequest

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``Flavor``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities with optional filters."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID."""


class IPrincipalRepository(IRepository[T]):
    """Repository contract for an authenticatable principal kind."""

    @abstractmethod
    def build(self, **fields: Any) -> T:
        """Instantiate (without saving) a principal of this kind."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[T]:
        """Retrieve a principal by its unique login name."""

    @abstractmethod
    def page(self, request: PageRequest) -> Page[T]:
        """Return one page of principals ordered by creation time."""

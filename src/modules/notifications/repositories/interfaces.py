"""Notification repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from modules.notifications.models import Notification


class INotificationRepository(ABC):
    @abstractmethod
    def create_for_customer(self, customer_id: str, message: str) -> Notification:
        """Store a notification addressed to a customer."""

    @abstractmethod
    def create_for_establishment(self, establishment_id: str, message: str) -> Notification:
        """Store a notification addressed to an establishment."""

    @abstractmethod
    def bulk_create_for_customers(self, customer_ids: Iterable[str], message: str) -> int:
        """Store one notification per customer; returns how many were written."""

    @abstractmethod
    def list_for_customer(self, customer_id: str) -> List[Notification]:
        """Newest first."""

    @abstractmethod
    def list_for_establishment(self, establishment_id: str) -> List[Notification]:
        """Newest first."""

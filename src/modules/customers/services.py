"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected repositories.

Business rules enforced here:
- Customer names are unique (``CredentialStore``).
- Secrets are re-hashed whenever they change.
- Interest in a flavor is recorded once per (customer, flavor) pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import structlog
from django.db import transaction

from modules.core.credentials import CredentialStore
from modules.core.tokens import issue_token
from modules.customers.exceptions import CustomerNotFound
from modules.flavors.exceptions import FlavorNotFound

if TYPE_CHECKING:
    from modules.core.dtos import LoginDTO
    from modules.customers.dtos import RegisterCustomerDTO, UpdateCustomerDTO
    from modules.customers.models import Customer, Interest
    from modules.customers.repositories.interfaces import (
        ICustomerRepository,
        IInterestRepository,
    )
    from modules.flavors.repositories.interfaces import IFlavorRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        interest_repository: IInterestRepository | None = None,
        flavor_repository: IFlavorRepository | None = None,
    ) -> None:
        self._repo = repository
        self._interests = interest_repository
        self._flavors = flavor_repository
        self._credentials = CredentialStore(repository, "Cliente")

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def register(self, dto: RegisterCustomerDTO) -> Tuple[Customer, str]:
        """Create a customer and open a session for it.

        Raises:
            PrincipalAlreadyExists: the name is taken (400).
        """
        customer = self._credentials.register(dto.name, dto.secret, address=dto.address)
        return customer, issue_token(customer)

    def login(self, dto: LoginDTO) -> Tuple[Customer, str]:
        customer = self._credentials.authenticate(dto.name, dto.secret)
        return customer, issue_token(customer)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_customer(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Update an existing customer with the supplied fields.

        Raises:
            CustomerNotFound: if the customer does not exist.
            PrincipalAlreadyExists: if the new name collides.
        """
        customer = self.get_customer(id)

        if dto.name is not None and dto.name != customer.name:
            self._credentials.ensure_name_available(dto.name, customer.id)
            customer.name = dto.name
        if dto.address is not None:
            customer.address = dto.address
        if dto.secret is not None:
            customer.set_secret(dto.secret)

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=str(id))
        return customer

    @transaction.atomic
    def delete_customer(self, id: str) -> None:
        """Delete a customer together with its orders and interests.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.delete(id):
            raise CustomerNotFound()
        logger.info("customer.deleted", customer_id=str(id))

    def register_interest(self, customer_id: str, flavor_id: str) -> Interest:
        """Ask to be notified when *flavor_id* becomes available.

        Raises:
            CustomerNotFound: the customer no longer exists.
            FlavorNotFound: unknown flavor.
        """
        self.get_customer(customer_id)
        if self._flavors.get_by_id(flavor_id) is None:
            raise FlavorNotFound()

        interest, created = self._interests.get_or_create(customer_id, flavor_id)
        logger.info(
            "interest.registered",
            customer_id=str(customer_id),
            flavor_id=str(flavor_id),
            created=created,
        )
        return interest

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, id: str) -> Customer:
        """Raises ``CustomerNotFound`` if the customer does not exist."""
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound()
        return customer

from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.core.tokens import issue_token
from modules.couriers.models import Courier
from modules.customers.models import Customer
from modules.establishments.constants import AssociationStatus
from modules.establishments.models import CourierAssociation, Establishment
from modules.flavors.models import Flavor

CUSTOMER_SECRET = "senha123"
ESTABLISHMENT_CODE = "123456"
COURIER_SECRET = "senha123"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Principals
# ---------------------------------------------------------------------------


def make_customer(name="Ana", secret=CUSTOMER_SECRET, address="Rua A, 1") -> Customer:
    customer = Customer(name=name, address=address)
    customer.set_secret(secret)
    customer.save()
    return customer


def make_establishment(name="Pizzaria Central", code=ESTABLISHMENT_CODE) -> Establishment:
    establishment = Establishment(name=name)
    establishment.set_secret(code)
    establishment.save()
    return establishment


def make_courier(name="Carlos", secret=COURIER_SECRET, is_available=True) -> Courier:
    courier = Courier(
        name=name,
        vehicle_plate="ABC1D23",
        vehicle_type="moto",
        vehicle_color="vermelha",
        is_available=is_available,
    )
    courier.set_secret(secret)
    courier.save()
    return courier


def make_flavor(establishment, name="Calabresa", is_available=True, **overrides) -> Flavor:
    fields = {
        "category": "salgada",
        "price_medium": Decimal("35.90"),
        "price_large": Decimal("45.90"),
    }
    fields.update(overrides)
    return Flavor.objects.create(
        establishment=establishment, name=name, is_available=is_available, **fields
    )


def authenticate(client: APIClient, principal) -> APIClient:
    """Attach a Bearer session token for *principal* to *client*."""
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(principal)}")
    return client


@pytest.fixture()
def customer():
    return make_customer()


@pytest.fixture()
def other_customer():
    return make_customer(name="Bruno", address="Rua B, 2")


@pytest.fixture()
def establishment():
    return make_establishment()


@pytest.fixture()
def courier():
    return make_courier()


@pytest.fixture()
def flavor(establishment):
    return make_flavor(establishment)


@pytest.fixture()
def approved_courier(courier, establishment):
    CourierAssociation.objects.create(
        courier=courier, establishment=establishment, status=AssociationStatus.APPROVED
    )
    return courier


@pytest.fixture()
def customer_client(customer):
    return authenticate(APIClient(), customer)


@pytest.fixture()
def other_customer_client(other_customer):
    return authenticate(APIClient(), other_customer)


@pytest.fixture()
def establishment_client(establishment):
    return authenticate(APIClient(), establishment)


@pytest.fixture()
def courier_client(courier):
    return authenticate(APIClient(), courier)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer_factory():
    return make_customer


@pytest.fixture()
def establishment_factory():
    return make_establishment


@pytest.fixture()
def courier_factory():
    return make_courier


@pytest.fixture()
def flavor_factory():
    return make_flavor


@pytest.fixture()
def auth():
    """``auth(principal)`` returns a new APIClient carrying its token."""
    return lambda principal: authenticate(APIClient(), principal)

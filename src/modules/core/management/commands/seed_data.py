from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal
from typing import Iterable

from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.couriers.models import Courier
from modules.customers.models import Customer
from modules.establishments.constants import AssociationStatus
from modules.establishments.models import CourierAssociation, Establishment
from modules.flavors.constants import FlavorCategory
from modules.flavors.models import Flavor
from modules.orders.constants import LIFECYCLE, PaymentMethod
from modules.orders.models import Order

# Development-only secrets; every seeded principal logs in with these.
CUSTOMER_SECRET = "senha123"
ESTABLISHMENT_CODE = "123456"
COURIER_SECRET = "senha123"


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        establishments = self._seed_establishments()
        flavors = self._seed_flavors(establishments)
        couriers = self._seed_couriers(establishments)
        orders_created = self._seed_orders(customers, flavors)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={len(customers)}, "
                f"establishments={len(establishments)}, "
                f"flavors={len(flavors)}, "
                f"couriers={len(couriers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ana Souza", "Rua das Flores, 10"),
            ("Bruno Lima", "Av. Brasil, 200"),
            ("Carla Mendes", "Rua Sete, 7"),
            ("Daniel Costa", "Rua do Sol, 45"),
            ("Fernanda Rocha", "Praça Central, 1"),
        ]
        for name, address in seed_customers:
            customer = Customer.objects.filter(name=name).first()
            if customer is None:
                customer = Customer(name=name, address=address)
                customer.set_secret(CUSTOMER_SECRET)
                customer.save()
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_establishments(self) -> list[Establishment]:
        self.stdout.write("Creating establishments...")
        establishments: list[Establishment] = []
        for name in ("Pizzaria Napoli", "Forno da Vila"):
            establishment = Establishment.objects.filter(name=name).first()
            if establishment is None:
                establishment = Establishment(name=name)
                establishment.set_secret(ESTABLISHMENT_CODE)
                establishment.save()
            establishments.append(establishment)
        self.stdout.write(self.style.SUCCESS("Creating establishments... Done!"))
        return establishments

    def _seed_flavors(self, establishments: list[Establishment]) -> list[Flavor]:
        self.stdout.write("Creating flavors...")
        flavors: list[Flavor] = []
        menu = [
            ("Margherita", FlavorCategory.SAVORY, Decimal("39.90"), Decimal("52.90")),
            ("Calabresa", FlavorCategory.SAVORY, Decimal("42.90"), Decimal("55.90")),
            ("Portuguesa", FlavorCategory.SAVORY, Decimal("45.90"), Decimal("59.90")),
            ("Quatro Queijos", FlavorCategory.SAVORY, Decimal("47.90"), Decimal("61.90")),
            ("Chocolate", FlavorCategory.SWEET, Decimal("38.90"), Decimal("49.90")),
            ("Romeu e Julieta", FlavorCategory.SWEET, Decimal("40.90"), Decimal("51.90")),
        ]
        for establishment in establishments:
            for name, category, price_medium, price_large in menu:
                flavor, _ = Flavor.objects.get_or_create(
                    establishment=establishment,
                    name=name,
                    defaults={
                        "category": category,
                        "price_medium": price_medium,
                        "price_large": price_large,
                        "is_available": random.random() > 0.2,
                    },
                )
                flavors.append(flavor)
        self.stdout.write(self.style.SUCCESS("Creating flavors... Done!"))
        return flavors

    def _seed_couriers(self, establishments: list[Establishment]) -> list[Courier]:
        self.stdout.write("Creating couriers...")
        couriers: list[Courier] = []
        seed_couriers = [
            ("Carlos Moto", "ABC1D23", "moto", "vermelha"),
            ("Paula Bike", "", "bicicleta", "azul"),
        ]
        for name, plate, vehicle, color in seed_couriers:
            courier = Courier.objects.filter(name=name).first()
            if courier is None:
                courier = Courier(
                    name=name,
                    vehicle_plate=plate,
                    vehicle_type=vehicle,
                    vehicle_color=color,
                    is_available=True,
                )
                courier.set_secret(COURIER_SECRET)
                courier.save()
            couriers.append(courier)
            for establishment in establishments:
                CourierAssociation.objects.get_or_create(
                    courier=courier,
                    establishment=establishment,
                    defaults={"status": AssociationStatus.APPROVED},
                )
        self.stdout.write(self.style.SUCCESS("Creating couriers... Done!"))
        return couriers

    def _seed_orders(self, customers: Iterable[Customer], flavors: list[Flavor]) -> int:
        self.stdout.write("Creating orders...")
        customers_list = list(customers)
        available = [flavor for flavor in flavors if flavor.is_available]
        if not customers_list or not available:
            self.stdout.write(self.style.WARNING("Skipping orders (no customers/flavors)."))
            return 0
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders (already seeded)."))
            return 0

        for _ in range(20):
            customer = random.choice(customers_list)
            order = Order.objects.create(
                customer=customer,
                flavor=random.choice(available),
                quantity=random.randint(1, 3),
                delivery_address=customer.address,
                payment_method=random.choice(PaymentMethod.values),
                status=random.choice(LIFECYCLE[:3]),
            )
            created_at = timezone.now() - timedelta(days=random.randint(0, 30))
            Order.objects.filter(id=order.id).update(created_at=created_at)

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return 20

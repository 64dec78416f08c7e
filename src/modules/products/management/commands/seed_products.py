from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import ProductInputDTO
from modules.products.repositories.django_repository import ProductDjangoRepository

SEED_NAMES = [
    "Widget",
    "Gadget",
    "Sprocket",
    "Gizmo",
    "Flange",
    "Bracket",
    "Coupler",
    "Bearing",
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=20,
            help="Number of products to create (default: 20).",
        )

    def handle(self, *args, **options):
        count = options["count"]
        random.seed(42)
        repo = ProductDjangoRepository()

        self.stdout.write(f"Creating {count} products...")
        for index in range(1, count + 1):
            name = f"{random.choice(SEED_NAMES)} {index:03d}"
            repo.create(
                ProductInputDTO(
                    name=name,
                    description=f"Demo product {index}",
                    price=Decimal(random.randint(100, 99999)) / 100,
                    quantity=random.randint(0, 500),
                )
            )

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={count}"))

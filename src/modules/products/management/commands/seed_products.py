from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Pen", Decimal("2.00")),
    ("Pencil", Decimal("1.50")),
    ("Notebook", Decimal("7.90")),
    ("Stapler", Decimal("12.45")),
    ("Sticky Notes", Decimal("3.25")),
    ("Sample Eraser", Decimal("0.00")),
]


class Command(BaseCommand):
    help = "Seed the product table with sample data for development."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        repository = ProductDjangoRepository()
        service = ProductService(repository=repository)
        existing = {product.name for product in repository.find_all()}

        created = 0
        for name, price in SEED_PRODUCTS:
            if name in existing:
                continue
            service.create_product(name, price)
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products_created={created}, "
                f"products_total={len(repository.find_all())}"
            )
        )

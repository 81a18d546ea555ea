from __future__ import annotations

import random

from django.core.management.base import BaseCommand

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.repositories import get_customer_repository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Alex", "alex@gmail.com", 11),
    ("Jamila", "jamila@gmail.com", 22),
]

FIRST_NAMES = ["Ying", "Amara", "Lucas", "Priya", "Noah", "Sofia", "Kenji", "Leila"]
SURNAMES = ["Yang", "Okafor", "Silva", "Patel", "Berg", "Rossi", "Sato", "Haddad"]


class Command(BaseCommand):
    help = "Seed the customer store with development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--random",
            type=int,
            default=0,
            metavar="N",
            help="Also register N randomly generated customers.",
        )
        parser.add_argument(
            "--seed", type=int, default=None, help="Seed for the random generator."
        )

    def handle(self, *args, **options):
        rng = random.Random(options["seed"])
        service = CustomerService(repository=get_customer_repository())

        candidates = list(SEED_CUSTOMERS)
        for _ in range(options["random"]):
            first, last = rng.choice(FIRST_NAMES), rng.choice(SURNAMES)
            email = f"{first.lower()}.{last.lower()}.{rng.randrange(10_000)}@gmail.com"
            candidates.append((f"{first} {last}", email, rng.randint(16, 98)))

        created = skipped = 0
        for name, email, age in candidates:
            try:
                service.register_customer(
                    CreateCustomerDTO(name=name, email=email, age=age)
                )
            except CustomerAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers={created}, skipped={skipped}"
            )
        )

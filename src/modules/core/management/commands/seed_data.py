from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.restaurants.models import Menu, MenuType, Restaurant

DEMO_EMAIL = "demo@foody.id"
DEMO_PASSWORD = "demo123"

RESTAURANTS = [
    ("Burger King", Decimal("4.5"), "Jakarta Selatan", -6.2615, 106.8106),
    ("Pizza Hut", Decimal("4.2"), "Jakarta Pusat", -6.1865, 106.8343),
    ("KFC", Decimal("4.0"), "Jakarta Utara", -6.1383, 106.8637),
]

MENUS = [
    ("Burger", 50000, MenuType.FOOD),
    ("Fries", 25000, MenuType.FOOD),
    ("Coca Cola", 15000, MenuType.DRINK),
]


class Command(BaseCommand):
    help = "Seed database with demo restaurants, menus and a demo user."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        restaurants, menus_created = self._seed_restaurants()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"restaurants={len(restaurants)}, "
                f"menus={menus_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        if User.objects.filter(email=DEMO_EMAIL).exists():
            return 0
        User.objects.create_user(
            DEMO_EMAIL, password=DEMO_PASSWORD, name="Demo User", phone="081234567890"
        )
        return 1

    def _seed_restaurants(self) -> tuple[list[Restaurant], int]:
        self.stdout.write("Creating restaurants...")
        restaurants: list[Restaurant] = []
        menus_created = 0
        for name, rating, place, lat, lng in RESTAURANTS:
            restaurant, _ = Restaurant.objects.get_or_create(
                name=name,
                defaults={
                    "rating": rating,
                    "place": place,
                    "latitude": lat,
                    "longitude": lng,
                },
            )
            restaurants.append(restaurant)
            for food_name, price, menu_type in MENUS:
                _, created = Menu.objects.get_or_create(
                    restaurant=restaurant,
                    food_name=food_name,
                    defaults={"price": price, "type": menu_type},
                )
                menus_created += int(created)
        self.stdout.write(self.style.SUCCESS("Creating restaurants... Done!"))
        return restaurants, menus_created

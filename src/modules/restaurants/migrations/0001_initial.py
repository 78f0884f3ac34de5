import decimal

import django.core.validators
import django.db.models.deletion
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=150)),
                (
                    "rating",
                    models.DecimalField(
                        decimal_places=1,
                        default=decimal.Decimal("0.0"),
                        max_digits=2,
                        validators=[
                            django.core.validators.MinValueValidator(decimal.Decimal("0.0")),
                            django.core.validators.MaxValueValidator(decimal.Decimal("5.0")),
                        ],
                    ),
                ),
                ("place", models.CharField(max_length=255)),
                ("latitude", models.FloatField()),
                ("longitude", models.FloatField()),
                ("logo", models.CharField(blank=True, default="", max_length=500)),
                ("images", models.JSONField(blank=True, default=list)),
            ],
            options={
                "db_table": "restaurants",
                "ordering": ["-rating", "name"],
                "indexes": [
                    models.Index(fields=["-rating"], name="restaurants_rating_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("rating__gte", 0), ("rating__lte", 5)),
                        name="restaurants_rating_range",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Menu",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("food_name", models.CharField(max_length=150)),
                ("price", models.PositiveIntegerField()),
                (
                    "type",
                    models.CharField(
                        choices=[("food", "Food"), ("drink", "Drink")],
                        default="food",
                        max_length=10,
                    ),
                ),
                ("image", models.CharField(blank=True, default="", max_length=500)),
                (
                    "restaurant",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="menus",
                        to="restaurants.restaurant",
                    ),
                ),
            ],
            options={
                "db_table": "restaurant_menus",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["restaurant", "price"], name="menus_restaurant_price_idx"
                    ),
                ],
            },
        ),
    ]

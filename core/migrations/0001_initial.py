"""Initial schema: users, restaurants, menu items and reviews."""

from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("user_id", models.BigAutoField(primary_key=True, serialize=False)),
                ("email", models.EmailField(max_length=255, unique=True)),
                ("password_hash", models.CharField(max_length=255)),
                ("display_name", models.CharField(max_length=100)),
                (
                    "avatar_url",
                    models.CharField(blank=True, max_length=500, null=True),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[("ADMIN", "ADMIN"), ("USER", "USER")],
                        default="USER",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                (
                    "restaurant_id",
                    models.BigAutoField(primary_key=True, serialize=False),
                ),
                ("name", models.CharField(max_length=200)),
                ("address", models.CharField(max_length=300)),
                ("city", models.CharField(max_length=100)),
                ("state", models.CharField(max_length=50)),
                ("zip_code", models.CharField(max_length=20)),
                ("phone", models.CharField(blank=True, max_length=30, null=True)),
                ("website", models.CharField(blank=True, max_length=500, null=True)),
                ("cuisine", models.CharField(max_length=100)),
                ("price_range", models.PositiveSmallIntegerField()),
                (
                    "image_url",
                    models.CharField(blank=True, max_length=500, null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="restaurants",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "restaurants",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["city"], name="idx_restaurants_city"),
                    models.Index(fields=["cuisine"], name="idx_restaurants_cuisine"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(price_range__gte=1, price_range__lte=4),
                        name="restaurants_price_range_1_4",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                (
                    "menu_item_id",
                    models.BigAutoField(primary_key=True, serialize=False),
                ),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, null=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("category", models.CharField(max_length=100)),
                (
                    "image_url",
                    models.CharField(blank=True, max_length=500, null=True),
                ),
                (
                    "avg_rating",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=3
                    ),
                ),
                ("review_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="menu_items",
                        to="core.user",
                    ),
                ),
                (
                    "restaurant",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="menu_items",
                        to="core.restaurant",
                    ),
                ),
            ],
            options={
                "db_table": "menu_items",
                "ordering": ["category", "name"],
                "indexes": [
                    models.Index(fields=["category"], name="idx_menu_items_category"),
                    models.Index(
                        fields=["-avg_rating"], name="idx_menu_items_avg_rating"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Review",
            fields=[
                ("review_id", models.BigAutoField(primary_key=True, serialize=False)),
                ("rating", models.PositiveSmallIntegerField()),
                ("comment", models.TextField(blank=True, null=True)),
                (
                    "image_url",
                    models.CharField(blank=True, max_length=500, null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "menu_item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="core.menuitem",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "reviews",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=["menu_item", "user"],
                        name="reviews_menu_item_user_unique",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(rating__gte=1, rating__lte=5),
                        name="reviews_rating_1_5",
                    ),
                ],
            },
        ),
    ]

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("order_number", models.CharField(max_length=32, unique=True)),
                ("customer_name", models.CharField(max_length=255)),
                ("customer_email", models.EmailField(max_length=254)),
                ("customer_phone", models.CharField(max_length=50)),
                ("company_name", models.CharField(blank=True, default="", max_length=255)),
                ("event_name", models.CharField(blank=True, default="", max_length=255)),
                ("event_start_date", models.DateField(blank=True, null=True)),
                ("event_end_date", models.DateField(blank=True, null=True)),
                ("postal_code", models.CharField(blank=True, default="", max_length=10)),
                ("shipping_address", models.TextField(blank=True, default="")),
                ("message", models.TextField(blank=True, default="")),
                ("subtotal", models.DecimalField(decimal_places=2, max_digits=12)),
                ("shipping_cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("collection_cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("total_amount", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending payment"),
                            ("quote", "Quote"),
                            ("paid", "Paid"),
                            ("payment_session_failed", "Payment session failed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=32,
                    ),
                ),
                ("payment_session_ref", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="order_status_idx"),
                    models.Index(fields=["payment_session_ref"], name="order_payment_ref_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderNumberSequence",
            fields=[
                ("name", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("last_value", models.PositiveIntegerField(default=0)),
            ],
            options={
                "db_table": "order_number_sequences",
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("product_id", models.CharField(max_length=36)),
                ("title", models.CharField(max_length=255)),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("quantity", models.PositiveIntegerField()),
                ("line_total", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "db_table": "order_items",
                "ordering": ["id"],
            },
        ),
    ]

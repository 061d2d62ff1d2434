import uuid

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending payment"
    QUOTE = "quote", "Quote"
    PAID = "paid", "Paid"
    PAYMENT_SESSION_FAILED = "payment_session_failed", "Payment session failed"
    CANCELLED = "cancelled", "Cancelled"


class Order(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=32, unique=True)
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField()
    customer_phone = models.CharField(max_length=50)
    company_name = models.CharField(max_length=255, blank=True, default="")
    event_name = models.CharField(max_length=255, blank=True, default="")
    event_start_date = models.DateField(null=True, blank=True)
    event_end_date = models.DateField(null=True, blank=True)
    postal_code = models.CharField(max_length=10, blank=True, default="")
    shipping_address = models.TextField(blank=True, default="")
    message = models.TextField(blank=True, default="")
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    shipping_cost = models.DecimalField(max_digits=10, decimal_places=2)
    collection_cost = models.DecimalField(max_digits=10, decimal_places=2)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=32, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )
    payment_session_ref = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="order_status_idx"),
            models.Index(fields=["payment_session_ref"], name="order_payment_ref_idx"),
        ]

    def __str__(self):
        return self.order_number


class OrderItem(models.Model):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product_id = models.CharField(max_length=36)
    title = models.CharField(max_length=255)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField()
    line_total = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        db_table = "order_items"
        ordering = ["id"]

    def __str__(self):
        return f"{self.order_id}: {self.title} x{self.quantity}"


class OrderNumberSequence(models.Model):
    """Per-day counter row locked while the next order number is drawn."""

    name = models.CharField(max_length=64, primary_key=True)
    last_value = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "order_number_sequences"

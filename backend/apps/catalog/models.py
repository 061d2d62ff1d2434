import uuid

from django.db import models


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.CharField(max_length=100)
    image_url = models.TextField(blank=True, default="")
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["category", "title"]
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["is_active"], name="product_active_idx"),
        ]

    def __str__(self):
        return self.title


class BundleOption(models.Model):
    """A fixed-size pack of a product rented at its own price (e.g. 5 iPads)."""

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="bundle_options"
    )
    size = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "product_bundle_options"
        unique_together = ("product", "size")
        ordering = ["size"]

    @property
    def category_tag(self) -> str:
        return f"Bundle-{self.size}"

    def __str__(self):
        return f"{self.product_id} x{self.size}"

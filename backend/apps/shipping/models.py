from django.db import models


class ShippingZone(models.Model):
    region_code = models.CharField(max_length=10, unique=True)
    zone_name = models.CharField(max_length=100)
    shipping_cost = models.DecimalField(max_digits=10, decimal_places=2)
    collection_cost = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "shipping_zones"
        ordering = ["region_code"]

    def __str__(self):
        return f"{self.region_code} ({self.zone_name})"

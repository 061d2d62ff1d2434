import uuid
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.container import build_product_service
from apps.catalog.models import BundleOption, Product
from apps.shipping.models import ShippingZone

# Stable ids so re-running the seed updates rows instead of duplicating them
SEED_NAMESPACE = uuid.UUID("9a4c1f52-3b7e-4d8a-a1f0-6c2e5d7b8f90")

PRODUCTS = [
    (
        "iPad 10.2 7-inch WiFi",
        "39.75",
        "iPad",
        "Event-ready tablet with kiosk mode, charger and protective case.",
        "/images/ipad-wifi.jpg",
        [(5, "199.00"), (10, "380.00")],
    ),
    (
        "iPad 10.2 7-inch CELLULAR",
        "49.75",
        "iPad",
        "Cellular tablet for venues without reliable WiFi.",
        "/images/ipad-cellular.jpg",
        [(5, "239.00"), (10, "460.00")],
    ),
    (
        "iPad 10.2 7-inch WiFi AND STAND READER",
        "59.75",
        "Bundle",
        "Tablet, floor stand and contactless card reader for fundraising and check-in.",
        "/images/ipad-stand-reader.jpg",
        [(5, "289.00")],
    ),
    (
        "iPad 10.2 7-inch CELLULAR AND STAND READER",
        "69.75",
        "Bundle",
        "Cellular tablet with floor stand and contactless card reader.",
        "/images/ipad-cellular-stand-reader.jpg",
        [],
    ),
    (
        "SMARTPHONE",
        "29.75",
        "Mobile",
        "Unlocked smartphone for ticket scanning and staff coordination.",
        "/images/smartphone.jpg",
        [(10, "280.00")],
    ),
    (
        "WINDOWS INTEL DESKTOP",
        "89.75",
        "Desktop",
        "Desktop workstation with monitor, keyboard and mouse.",
        "/images/desktop.jpg",
        [],
    ),
    (
        "APPLE/MAC LAPTOPS",
        "79.75",
        "Laptop",
        "MacBook laptops for registration desks and presentations.",
        "/images/laptop.jpg",
        [],
    ),
]

SHIPPING_ZONES = [
    ("NJ", "Tri-State Local", "45.00", "45.00"),
    ("NY", "Tri-State Local", "55.00", "55.00"),
    ("PA", "Tri-State Local", "60.00", "60.00"),
    ("CT", "Tri-State Local", "60.00", "60.00"),
    ("MA", "Northeast", "85.00", "85.00"),
    ("FL", "Southeast", "125.00", "125.00"),
    ("TX", "South Central", "135.00", "135.00"),
    ("IL", "Midwest", "110.00", "110.00"),
    ("CA", "West Coast", "150.00", "150.00"),
    ("WA", "West Coast", "150.00", "150.00"),
]


class Command(BaseCommand):
    help = "Seed rental products, bundle options and shipping zones."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing catalog and zones before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            BundleOption.objects.all().delete()
            Product.objects.all().delete()
            ShippingZone.objects.all().delete()

        self.stdout.write("Seeding products...")
        for title, price, category, description, image_url, bundles in PRODUCTS:
            product, _ = Product.objects.update_or_create(
                id=uuid.uuid5(SEED_NAMESPACE, title),
                defaults=dict(
                    title=title,
                    price=Decimal(price),
                    category=category,
                    description=description,
                    image_url=image_url,
                    is_active=True,
                ),
            )
            for size, bundle_price in bundles:
                BundleOption.objects.update_or_create(
                    product=product, size=size, defaults={"price": Decimal(bundle_price)}
                )

        self.stdout.write("Seeding shipping zones...")
        for region_code, zone_name, shipping_cost, collection_cost in SHIPPING_ZONES:
            ShippingZone.objects.update_or_create(
                region_code=region_code,
                defaults=dict(
                    zone_name=zone_name,
                    shipping_cost=Decimal(shipping_cost),
                    collection_cost=Decimal(collection_cost),
                ),
            )

        build_product_service().bump_cache_version()
        self.stdout.write(self.style.SUCCESS("Storefront seed completed."))

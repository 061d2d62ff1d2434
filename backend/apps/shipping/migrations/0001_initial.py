from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ShippingZone",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("region_code", models.CharField(max_length=10, unique=True)),
                ("zone_name", models.CharField(max_length=100)),
                ("shipping_cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("collection_cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "shipping_zones",
                "ordering": ["region_code"],
            },
        ),
    ]

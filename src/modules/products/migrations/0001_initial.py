import django.utils.timezone
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
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
                ("name", models.CharField(max_length=15)),
                (
                    "creation_date",
                    models.DateTimeField(
                        default=django.utils.timezone.now, editable=False
                    ),
                ),
                ("under_sale", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "products",
                "ordering": ["creation_date"],
                "indexes": [
                    models.Index(
                        fields=["under_sale"], name="products_under_sale_idx"
                    ),
                    models.Index(
                        fields=["creation_date"], name="products_creation_date_idx"
                    ),
                ],
            },
        ),
    ]

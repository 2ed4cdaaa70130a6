from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Owner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("address", models.CharField(max_length=255)),
                (
                    "photo",
                    models.CharField(
                        blank=True,
                        help_text="URL or path of the photo.",
                        max_length=500,
                        null=True,
                    ),
                ),
                ("birthday", models.DateField()),
            ],
            options={
                "verbose_name": "Owner",
                "verbose_name_plural": "Owners",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Property",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("address", models.CharField(db_index=True, max_length=255)),
                ("price", models.DecimalField(db_index=True, decimal_places=2, max_digits=18)),
                ("code_internal", models.CharField(max_length=100, unique=True)),
                ("year", models.PositiveIntegerField(db_index=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="properties",
                        to="properties.owner",
                    ),
                ),
            ],
            options={
                "verbose_name": "Property",
                "verbose_name_plural": "Properties",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="PropertyImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file", models.TextField(help_text="Path, URL or base64 payload of the image.")),
                ("enabled", models.BooleanField(default=True)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="images",
                        to="properties.property",
                    ),
                ),
            ],
            options={
                "verbose_name": "Property image",
                "verbose_name_plural": "Property images",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="PropertyTrace",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date_sale", models.DateTimeField()),
                ("name", models.CharField(max_length=255)),
                ("value", models.DecimalField(decimal_places=2, max_digits=18)),
                ("tax", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=18)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="traces",
                        to="properties.property",
                    ),
                ),
            ],
            options={
                "verbose_name": "Property trace",
                "verbose_name_plural": "Property traces",
                "ordering": ["id"],
            },
        ),
    ]

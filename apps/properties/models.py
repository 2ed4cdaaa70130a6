"""Property persistence models.

Tables backing the property domain: owners, properties, their images and
the price ledger. Domain rules live in ``apps.properties.domain``; these
models only describe storage, including the unique internal code and the
cascade from a property to its images and traces.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.entities import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


class Owner(models.Model):
    """Person who holds one or more properties."""

    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    photo = models.CharField(max_length=500, null=True, blank=True, help_text=_("URL or path of the photo."))
    birthday = models.DateField()

    class Meta:
        verbose_name = _("Owner")
        verbose_name_plural = _("Owners")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Property(models.Model):
    """Real-estate object with its current price."""

    name = models.CharField(max_length=255, db_index=True)
    address = models.CharField(max_length=255, db_index=True)
    price = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        db_index=True,
    )
    code_internal = models.CharField(max_length=100, unique=True)
    year = models.PositiveIntegerField(db_index=True)
    owner = models.ForeignKey(
        Owner,
        on_delete=models.CASCADE,
        related_name="properties",
    )

    class Meta:
        verbose_name = _("Property")
        verbose_name_plural = _("Properties")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} [{self.code_internal}]"


class PropertyImage(models.Model):
    """Image attached to a property."""

    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name="images")
    file = models.TextField(help_text=_("Path, URL or base64 payload of the image."))
    enabled = models.BooleanField(default=True)

    class Meta:
        verbose_name = _("Property image")
        verbose_name_plural = _("Property images")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Image {self.pk} of property {self.property_id}"


class PropertyTrace(models.Model):
    """Entry of the append-only price ledger of a property."""

    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name="traces")
    date_sale = models.DateTimeField()
    name = models.CharField(max_length=255)
    value = models.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    tax = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        default=Decimal("0.00"),
    )

    class Meta:
        verbose_name = _("Property trace")
        verbose_name_plural = _("Property traces")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} {self.value} ({self.date_sale:%Y-%m-%d})"

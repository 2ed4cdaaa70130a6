"""Django ORM implementation of the property repository ports.

Rows are turned into domain entities through the ``restore`` constructors,
never through the validating factories. Writes assume they run inside a
``DjangoUnitOfWork``; the only savepoint opened here isolates the unique
code check so a duplicate can be told apart from other integrity errors.
"""

from __future__ import annotations

import logging
from typing import List

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Prefetch  # type: ignore

from shared.domain.exceptions import DuplicateCodeError
from shared.domain.value_objects import PagedResult

from . import models
from .domain.entities import Owner, Property, PropertyImage, PropertyTrace
from .domain.query import PropertyFilter
from .domain.repositories import AbstractOwnerRepository, AbstractPropertyRepository
from .filters import apply_property_filter

logger = logging.getLogger(__name__)


def owner_to_entity(row: models.Owner) -> Owner:
    return Owner.restore(
        id=row.pk,
        name=row.name,
        address=row.address,
        birthday=row.birthday,
        photo=row.photo,
    )


def image_to_entity(row: models.PropertyImage) -> PropertyImage:
    return PropertyImage.restore(
        id=row.pk,
        property_id=row.property_id,
        file=row.file,
        enabled=row.enabled,
    )


def trace_to_entity(row: models.PropertyTrace) -> PropertyTrace:
    return PropertyTrace.restore(
        id=row.pk,
        property_id=row.property_id,
        date_sale=row.date_sale,
        name=row.name,
        value=row.value,
        tax=row.tax,
    )


def property_to_entity(row: models.Property, *, with_owner: bool = False) -> Property:
    """Hydrate the aggregate; children must already be prefetched."""

    owner = owner_to_entity(row.owner) if with_owner else None
    return Property.restore(
        id=row.pk,
        name=row.name,
        address=row.address,
        price=row.price,
        code_internal=row.code_internal,
        year=row.year,
        owner_id=row.owner_id,
        owner=owner,
        images=[image_to_entity(image) for image in row.images.all()],
        traces=[trace_to_entity(trace) for trace in row.traces.all()],
    )


class DjangoPropertyRepository(AbstractPropertyRepository):
    """Property gateway backed by the Django ORM."""

    def _base_queryset(self):
        return models.Property.objects.prefetch_related(
            Prefetch("images", queryset=models.PropertyImage.objects.order_by("id")),
            Prefetch("traces", queryset=models.PropertyTrace.objects.order_by("id")),
        )

    def get_by_id(self, property_id: int) -> Property | None:
        row = self._base_queryset().filter(pk=property_id).first()
        return property_to_entity(row) if row else None

    def get_details(self, property_id: int) -> Property | None:
        row = self._base_queryset().select_related("owner").filter(pk=property_id).first()
        return property_to_entity(row, with_owner=True) if row else None

    def get_by_owner_id(self, owner_id: int) -> List[Property]:
        rows = self._base_queryset().filter(owner_id=owner_id).order_by("id")
        return [property_to_entity(row) for row in rows]

    def list_paged(self, filter_: PropertyFilter) -> PagedResult[Property]:
        queryset = apply_property_filter(
            self._base_queryset().select_related("owner"),
            filter_,
        ).order_by("id")
        total_count = queryset.count()
        rows = queryset[filter_.skip:filter_.skip + filter_.take]
        return PagedResult(
            items=[property_to_entity(row, with_owner=True) for row in rows],
            total_count=total_count,
            page_number=filter_.page_number,
            page_size=filter_.page_size,
        )

    def add(self, property_obj: Property) -> Property:
        row = models.Property(
            name=property_obj.name,
            address=property_obj.address,
            price=property_obj.price,
            code_internal=property_obj.code_internal,
            year=property_obj.year,
            owner_id=property_obj.owner_id,
        )
        self._save_unique(row, property_obj.code_internal)
        property_obj.assign_identity(row.pk)
        logger.debug(f"Inserted property {row.pk} ({row.code_internal})")
        return property_obj

    def update(self, property_obj: Property) -> None:
        row = models.Property(
            pk=property_obj.id,
            name=property_obj.name,
            address=property_obj.address,
            price=property_obj.price,
            code_internal=property_obj.code_internal,
            year=property_obj.year,
            owner_id=property_obj.owner_id,
        )
        self._save_unique(
            row,
            property_obj.code_internal,
            update_fields=["name", "address", "price", "code_internal", "year", "owner"],
        )

    def add_image(self, image: PropertyImage) -> PropertyImage:
        row = models.PropertyImage.objects.create(
            property_id=image.property_id,
            file=image.file,
            enabled=image.enabled,
        )
        image.assign_identity(row.pk)
        return image

    def update_image(self, image: PropertyImage) -> None:
        models.PropertyImage.objects.filter(pk=image.id).update(enabled=image.enabled)

    def add_trace(self, trace: PropertyTrace) -> PropertyTrace:
        row = models.PropertyTrace.objects.create(
            property_id=trace.property_id,
            date_sale=trace.date_sale,
            name=trace.name,
            value=trace.value,
            tax=trace.tax,
        )
        trace.assign_identity(row.pk)
        return trace

    def _save_unique(self, row: models.Property, code_internal: str, **save_kwargs) -> None:
        try:
            with transaction.atomic():
                row.save(**save_kwargs)
        except IntegrityError:
            duplicate = models.Property.objects.filter(code_internal=code_internal)
            if row.pk is not None:
                duplicate = duplicate.exclude(pk=row.pk)
            if duplicate.exists():
                raise DuplicateCodeError(code_internal)
            raise


class DjangoOwnerRepository(AbstractOwnerRepository):
    """Owner gateway backed by the Django ORM."""

    def get_by_id(self, owner_id: int) -> Owner | None:
        row = models.Owner.objects.filter(pk=owner_id).first()
        return owner_to_entity(row) if row else None

    def add(self, owner: Owner) -> Owner:
        row = models.Owner.objects.create(
            name=owner.name,
            address=owner.address,
            birthday=owner.birthday,
            photo=owner.photo,
        )
        owner.assign_identity(row.pk)
        return owner

    def update(self, owner: Owner) -> None:
        models.Owner.objects.filter(pk=owner.id).update(
            name=owner.name,
            address=owner.address,
            birthday=owner.birthday,
            photo=owner.photo,
        )

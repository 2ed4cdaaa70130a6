"""Tests for the owner application service."""

from __future__ import annotations

from datetime import date

import pytest

from apps.properties import models
from apps.properties.application.commands import CreateOwnerCommand, OwnerPatch
from apps.properties.application.services import OwnerService
from shared.domain.exceptions import NotFoundError, ValidationError

pytestmark = pytest.mark.django_db


@pytest.fixture
def service():
    return OwnerService()


def test_create_owner(service):
    owner = service.create(CreateOwnerCommand(name="Jane", address="Main St 1", birthday=date(1980, 1, 1)))

    assert owner.id is not None
    assert owner.photo is None
    assert models.Owner.objects.get(pk=owner.id).name == "Jane"


def test_create_owner_reports_every_violation(service):
    with pytest.raises(ValidationError) as exc_info:
        service.create(CreateOwnerCommand(name=" ", address="", birthday=None))

    assert exc_info.value.errors == [
        "Name cannot be empty",
        "Address cannot be empty",
        "Birthday is required",
    ]
    assert models.Owner.objects.count() == 0


def test_update_writes_only_given_fields(service):
    created = service.create(CreateOwnerCommand(name="Jane", address="Main St 1", birthday=date(1980, 1, 1)))

    updated = service.update(created.id, OwnerPatch(photo="jane.png"))

    assert updated.name == "Jane"
    assert updated.photo == "jane.png"
    assert service.get(created.id).photo == "jane.png"


def test_unknown_owner(service):
    with pytest.raises(NotFoundError):
        service.get(404)
    with pytest.raises(NotFoundError):
        service.update(404, OwnerPatch(name="X"))

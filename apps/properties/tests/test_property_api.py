"""Integration tests for the property and owner API endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.properties.models import Owner, Property, PropertyImage, PropertyTrace


class PropertyAPITests(APITestCase):
    """Covers the property lifecycle, listing and error mapping."""

    def setUp(self) -> None:
        self.owner = Owner.objects.create(name="Jane", address="Main St 1", birthday=date(1980, 1, 1))
        self.list_url = reverse("property-list")

    def _payload(self, **overrides) -> dict:
        payload = {
            "name": "Test",
            "address": "Addr",
            "price": "100",
            "code_internal": "Code",
            "year": 2020,
            "owner_id": self.owner.id,
        }
        payload.update(overrides)
        return payload

    def _create(self, **overrides) -> dict:
        response = self.client.post(self.list_url, self._payload(**overrides), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data

    def test_create_property(self) -> None:
        data = self._create()

        self.assertEqual(data["price"], "100.00")
        self.assertEqual(data["owner"]["id"], self.owner.id)
        self.assertEqual(data["images"], [])
        self.assertTrue(Property.objects.filter(pk=data["id"]).exists())

    def test_create_reports_all_violations(self) -> None:
        response = self.client.post(
            self.list_url, self._payload(name="", price="0", year=1900), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(len(response.data["errors"]), 3)
        self.assertIn("Price must be positive", response.data["error"])

    def test_create_with_unknown_owner(self) -> None:
        response = self.client.post(self.list_url, self._payload(owner_id=999), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Owner 999 not found"})

    def test_duplicate_code_is_a_conflict(self) -> None:
        self._create()

        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("Code", response.data["error"])

    def test_change_price_then_details(self) -> None:
        created = self._create()

        response = self.client.patch(
            reverse("property-price", args=[created["id"]]), {"price": "200"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        details = self.client.get(reverse("property-details", args=[created["id"]]))
        self.assertEqual(details.status_code, status.HTTP_200_OK)
        self.assertEqual(details.data["price"], "200.00")
        self.assertEqual(len(details.data["traces"]), 1)
        self.assertEqual(details.data["traces"][0]["value"], "200.00")
        self.assertEqual(details.data["traces"][0]["tax"], "0.00")
        self.assertEqual(details.data["traces"][0]["name"], "Price Change")

    def test_change_price_of_unknown_property(self) -> None:
        response = self.client.patch(reverse("property-price", args=[999]), {"price": "200"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_images(self) -> None:
        created = self._create()

        response = self.client.post(
            reverse("property-images", args=[created["id"]]), {"file": "front.jpg"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        image = PropertyImage.objects.get(property_id=created["id"])
        response = self.client.post(
            reverse("property-disable-image", kwargs={"pk": created["id"], "image_id": image.id})
        )
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        image.refresh_from_db()
        self.assertFalse(image.enabled)

    def test_patch_preserves_missing_fields(self) -> None:
        created = self._create()

        response = self.client.patch(
            reverse("property-detail", args=[created["id"]]),
            {"address": "New Addr", "name": None},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["name"], "Test")
        self.assertEqual(response.data["address"], "New Addr")
        self.assertEqual(PropertyTrace.objects.count(), 0)

    def test_list_with_filters_and_paging(self) -> None:
        for index in range(5):
            self._create(code_internal=f"C{index}", price=str(100 * (index + 1)))

        response = self.client.get(
            self.list_url, {"min_price": "200", "max_price": "400", "page_size": 2, "page_number": 2}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total_count"], 3)
        self.assertEqual(response.data["total_pages"], 2)
        self.assertEqual([item["code_internal"] for item in response.data["items"]], ["C3"])

    def test_list_rejects_inverted_price_range(self) -> None:
        response = self.client.get(self.list_url, {"min_price": "500", "max_price": "100"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"], ["Min price must be less than or equal to max price"]
        )

    def test_list_by_owner(self) -> None:
        created = self._create()

        response = self.client.get(reverse("property-by-owner", kwargs={"owner_id": self.owner.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data], [created["id"]])

    def test_unexpected_error_is_hidden(self) -> None:
        created = self._create()

        with mock.patch(
            "apps.properties.application.services.PropertyService.get_details",
            side_effect=RuntimeError("secret detail"),
        ):
            response = self.client.get(reverse("property-detail", args=[created["id"]]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "Internal Server Error"})


class OwnerAPITests(APITestCase):
    def test_owner_lifecycle(self) -> None:
        response = self.client.post(
            reverse("owner-list"),
            {"name": "Jane", "address": "Main St 1", "birthday": "1980-01-01"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        owner_id = response.data["id"]

        response = self.client.patch(
            reverse("owner-detail", args=[owner_id]), {"address": "Elm St 2"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        response = self.client.get(reverse("owner-detail", args=[owner_id]))
        self.assertEqual(response.data["name"], "Jane")
        self.assertEqual(response.data["address"], "Elm St 2")
        self.assertEqual(response.data["birthday"], "1980-01-01")

    def test_unknown_owner(self) -> None:
        response = self.client.get(reverse("owner-detail", args=[404]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

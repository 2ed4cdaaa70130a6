"""URL routing for property owners."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import OwnerViewSet

router = SimpleRouter()
router.register(r"", OwnerViewSet, basename="owner")

urlpatterns = [
    path("", include(router.urls)),
]

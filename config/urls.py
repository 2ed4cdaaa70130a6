"""URL configuration for the property catalogue.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the application routers provided by Django Rest Framework and the OpenAPI
schema served by drf-spectacular.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/v1/properties/', include('apps.properties.urls')),
    path('api/v1/owners/', include('apps.properties.owner_urls')),
    # API documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

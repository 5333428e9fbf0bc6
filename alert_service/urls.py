"""URL configuration for the alert service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/alerts/", include("alerts.urls")),
]

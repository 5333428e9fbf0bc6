"""URL routing configuration for the alerts application."""

from django.urls import path

from .views import (
    MarkAlertsReadView,
    MarkAlertsUnreadView,
    UserAlertCountView,
    UserAlertDetailView,
    UserAlertListView,
)

urlpatterns = [
    path("users/me/alerts", UserAlertListView.as_view(), name="user-alert-list"),
    path(
        "users/me/alerts/count",
        UserAlertCountView.as_view(),
        name="user-alert-count",
    ),
    path(
        "users/me/alerts/read",
        MarkAlertsReadView.as_view(),
        name="user-alert-mark-read",
    ),
    path(
        "users/me/alerts/unread",
        MarkAlertsUnreadView.as_view(),
        name="user-alert-mark-unread",
    ),
    path(
        "users/me/alerts/<int:alert_id>",
        UserAlertDetailView.as_view(),
        name="user-alert-detail",
    ),
]

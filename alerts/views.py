"""API views for the authenticated user's alerts."""

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from alerts.auth import JWTAuthentication
from alerts.schemas.alert import (
    AlertListQuery,
    AlertUpdateResponse,
    DeleteAlertsRequest,
    MarkAlertsRequest,
    UserAlertCountResponse,
    UserAlertListResponse,
)
from alerts.services.alert_renderer import render_alert, render_alerts
from alerts.services.registry import alert_unit_of_work, get_alert_registry

logger = structlog.get_logger(__name__)


class UserAlertListView(APIView):
    """API endpoint for the authenticated user's alert list.

    GET: Page of visible alerts with counts
    DELETE: Delete alerts by ID
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return a page of alerts, newest first.

        Query parameters:
        - start: Offset (default: 0)
        - limit: Page size (default: configured ALERTS_PER_PAGE, max: 100)
        - unreadOnly: Only unread alerts (default: false)
        """
        query = AlertListQuery.model_validate(request.query_params.dict())
        registry = get_alert_registry()

        with alert_unit_of_work(request.user, registry) as alert_manager:
            alerts = alert_manager.get_alerts(
                start=query.start,
                limit=query.limit,
                unread_only=query.unread_only,
            )
            response = UserAlertListResponse(
                alerts=render_alerts(alerts, registry.alert_formatter_manager),
                total_count=alert_manager.get_num_alerts(),
                unread_count=alert_manager.get_num_unread_alerts(),
                start=query.start,
                limit=query.limit or settings.ALERTS_PER_PAGE,
            )

        logger.info(
            "user_alerts_listed",
            user_id=request.user.uid,
            count=len(response.alerts),
        )
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)

    def delete(self, request):
        """Delete the user's alerts listed in the body."""
        body = DeleteAlertsRequest.model_validate(request.data)

        with alert_unit_of_work(request.user) as alert_manager:
            deleted = alert_manager.delete_alerts(body.alert_ids)

        return Response(
            AlertUpdateResponse(affected_count=deleted).model_dump(by_alias=True),
            status=status.HTTP_200_OK,
        )


class UserAlertCountView(APIView):
    """API endpoint returning the user's alert counts."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return total and unread alert counts."""
        with alert_unit_of_work(request.user) as alert_manager:
            response = UserAlertCountResponse(
                total_count=alert_manager.get_num_alerts(),
                unread_count=alert_manager.get_num_unread_alerts(),
            )
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)


class UserAlertDetailView(APIView):
    """API endpoint for one of the user's alerts."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, alert_id: int):
        """Return a single rendered alert.

        Raises:
            AlertNotFoundError: If the alert is not visible to the user (404).
        """
        registry = get_alert_registry()
        with alert_unit_of_work(request.user, registry) as alert_manager:
            alert = alert_manager.get_alert(alert_id)
        rendered = render_alert(alert, registry.alert_formatter_manager)
        return Response(rendered.model_dump(by_alias=True), status=status.HTTP_200_OK)


class MarkAlertsReadView(APIView):
    """API endpoint marking alerts as read.

    An empty or missing alertIds list marks every alert as read.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Mark alerts as read."""
        body = MarkAlertsRequest.model_validate(request.data or {})

        with alert_unit_of_work(request.user) as alert_manager:
            if body.alert_ids:
                affected = alert_manager.mark_read(body.alert_ids)
            else:
                affected = alert_manager.mark_all_read()

        return Response(
            AlertUpdateResponse(affected_count=affected).model_dump(by_alias=True),
            status=status.HTTP_200_OK,
        )


class MarkAlertsUnreadView(APIView):
    """API endpoint marking alerts as unread."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Mark alerts as unread."""
        body = MarkAlertsRequest.model_validate(request.data or {})

        with alert_unit_of_work(request.user) as alert_manager:
            affected = alert_manager.mark_unread(body.alert_ids)

        return Response(
            AlertUpdateResponse(affected_count=affected).model_dump(by_alias=True),
            status=status.HTTP_200_OK,
        )

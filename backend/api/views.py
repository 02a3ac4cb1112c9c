"""REST API views for weather forecast reports."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.core.notifications import NotificationsClient, RequestConfig
from backend.core.repository import InMemoryForecastRepository
from backend.core.schemas import WeatherForecastReport
from backend.core.services.forecast_service import (
    ForecastNotFound,
    ForecastService,
    ForecastValidationError,
)


@lru_cache(maxsize=1)
def get_forecast_service() -> ForecastService:
    notifier = NotificationsClient(
        base_url=settings.NOTIFICATIONS_BASE_URL,
        request_config=RequestConfig(timeout=settings.NOTIFICATIONS_TIMEOUT_SECONDS),
    )
    return ForecastService(repository=InMemoryForecastRepository(), notifier=notifier)


@receiver(setting_changed)
def reset_forecast_service(*, setting: str, **kwargs) -> None:
    """Start over with an empty service whenever the notification target changes."""
    if not setting.startswith("NOTIFICATIONS_"):
        return
    if get_forecast_service.cache_info().currsize:
        get_forecast_service().close()
    get_forecast_service.cache_clear()


def _validation_errors(exc: ValidationError) -> list:
    return [
        {"loc": ".".join(str(part) for part in error["loc"]), "msg": error["msg"]}
        for error in exc.errors()
    ]


class ForecastServiceMixin:
    """Views use the bound ``service`` or fall back to the settings-built one."""

    service: Optional[ForecastService] = None

    def get_service(self) -> ForecastService:
        if self.service is not None:
            return self.service
        return get_forecast_service()


class WeatherForecastView(ForecastServiceMixin, APIView):
    """Accept new forecast reports."""

    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):  # noqa: D401
        """Validate, store and announce the reported forecast."""
        try:
            report = WeatherForecastReport.model_validate(request.data)
        except ValidationError as exc:
            return Response(
                {"detail": "invalid forecast report", "errors": _validation_errors(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            result = self.get_service().report_forecast(report)
        except ForecastValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(result.to_wire(), status=status.HTTP_200_OK)


class WeatherForecastDetailView(ForecastServiceMixin, APIView):
    permission_classes = [AllowAny]

    def get(self, request, forecast_id, *args, **kwargs):
        try:
            report = self.get_service().get_forecast(forecast_id)
        except ForecastNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(report.to_wire(), status=status.HTTP_200_OK)


class UserWeatherForecastsView(ForecastServiceMixin, APIView):
    """List forecasts reported by one user of one tenant, oldest first."""

    permission_classes = [AllowAny]

    def get(self, request, tenant_id, user_id, *args, **kwargs):
        reports = self.get_service().list_forecasts(tenant_id, user_id)
        return Response([report.to_wire() for report in reports], status=status.HTTP_200_OK)

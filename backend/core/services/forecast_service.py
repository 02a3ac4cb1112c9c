"""Forecast service: validate, store, notify."""
from __future__ import annotations

from typing import List
from uuid import UUID

import logging

from backend.core.abstractions import MIN_TEMPERATURE_C, ForecastNotifier, ForecastRepository
from backend.core.notifications import NotificationDeliveryError
from backend.core.schemas import ForecastCreationResult, ForecastReportedEvent, WeatherForecastReport


logger = logging.getLogger(__name__)


class ForecastServiceError(RuntimeError):
    """Base class for errors surfaced to the API layer."""


class ForecastValidationError(ForecastServiceError):
    """Raised when a report breaks a domain rule."""


class ForecastNotFound(ForecastServiceError):
    """Raised when no forecast was stored under the requested id."""


class ForecastService:
    """Accept forecast reports, keep them and announce every acceptance."""

    def __init__(self, repository: ForecastRepository, notifier: ForecastNotifier) -> None:
        self._repository = repository
        self._notifier = notifier

    def report_forecast(self, report: WeatherForecastReport) -> ForecastCreationResult:
        if report.temperature_c < MIN_TEMPERATURE_C:
            logger.warning(
                "Rejected forecast from %s/%s: temperature %s below %s",
                report.tenant_id,
                report.user_id,
                report.temperature_c,
                MIN_TEMPERATURE_C,
            )
            raise ForecastValidationError(
                f"temperatureC must be greater than or equal to {MIN_TEMPERATURE_C}"
            )

        stored = self._repository.add(report)
        logger.info("Stored forecast %s for %s/%s", stored.id, report.tenant_id, report.user_id)

        try:
            self._notifier.notify_forecast_reported(ForecastReportedEvent.from_report(report))
        except NotificationDeliveryError as exc:
            # the report stays accepted; delivery is best effort
            logger.warning("Notification about forecast %s was not delivered: %s", stored.id, exc)

        return ForecastCreationResult(id=stored.id)

    def get_forecast(self, forecast_id: UUID) -> WeatherForecastReport:
        stored = self._repository.get(forecast_id)
        if stored is None:
            raise ForecastNotFound(f"forecast {forecast_id} does not exist")
        return stored.report

    def list_forecasts(self, tenant_id: str, user_id: str) -> List[WeatherForecastReport]:
        return [stored.report for stored in self._repository.list_for(tenant_id, user_id)]

    def close(self) -> None:
        self._notifier.close()


__all__ = ["ForecastService", "ForecastServiceError", "ForecastValidationError", "ForecastNotFound"]

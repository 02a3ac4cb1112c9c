"""Core abstractions for the forecast domain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple
from uuid import UUID

from backend.core.schemas import ForecastReportedEvent, WeatherForecastReport

MIN_TEMPERATURE_C = -100


@dataclass(frozen=True, slots=True)
class StoredForecast:
    """An accepted report together with the identifier assigned to it."""

    id: UUID
    report: WeatherForecastReport

    @property
    def owner(self) -> Tuple[str, str]:
        return self.report.tenant_id, self.report.user_id


class ForecastRepository(Protocol):
    """Storage for accepted forecasts."""

    def add(self, report: WeatherForecastReport) -> StoredForecast:
        """Store the report under a newly allocated identifier."""
        ...

    def get(self, forecast_id: UUID) -> Optional[StoredForecast]:
        ...

    def list_for(self, tenant_id: str, user_id: str) -> List[StoredForecast]:
        """Return forecasts of the owner in the order they were added."""
        ...


class ForecastNotifier(Protocol):
    """Outbound channel informing third parties about accepted reports."""

    def notify_forecast_reported(self, event: ForecastReportedEvent) -> None:
        ...

    def close(self) -> None:
        """Release connections held by the notifier."""
        ...

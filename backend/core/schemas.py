"""Wire schemas shared by the API layer, the notifier and the test driver.

Attributes are snake_case in Python and camelCase on the wire.  The models
only check structure (presence and types); domain rules such as the
temperature floor live in :mod:`backend.core.services.forecast_service` so a
syntactically valid but rejected report can still be expressed.
"""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

__all__ = [
    "ForecastCreationResult",
    "ForecastReportedEvent",
    "WeatherForecastReport",
]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class WeatherForecastReport(_WireModel):
    """A forecast reported by a user on behalf of a tenant."""

    tenant_id: str
    user_id: str
    time: datetime
    temperature_c: StrictInt
    summary: str


class ForecastCreationResult(_WireModel):
    id: UUID


class ForecastReportedEvent(_WireModel):
    """Payload posted to the notification endpoint for every accepted report."""

    tenant_id: str
    user_id: str
    temperature_c: StrictInt

    @classmethod
    def from_report(cls, report: WeatherForecastReport) -> "ForecastReportedEvent":
        return cls(
            tenant_id=report.tenant_id,
            user_id=report.user_id,
            temperature_c=report.temperature_c,
        )

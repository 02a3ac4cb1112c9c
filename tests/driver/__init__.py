"""Driver used by the end-to-end scenarios of the forecast API."""
from __future__ import annotations

from .actors import User
from .app_driver import AppDriver, DriverState, DriverStateError
from .builders import TemperatureSequence, WeatherForecastReportBuilder
from .disposables import Disposables
from .forecast_api import ReportForecastResponse, RetrievedForecast, RetrievedForecasts
from .notifications import NotificationRecipient

__all__ = [
    "AppDriver",
    "Disposables",
    "DriverState",
    "DriverStateError",
    "NotificationRecipient",
    "ReportForecastResponse",
    "RetrievedForecast",
    "RetrievedForecasts",
    "TemperatureSequence",
    "User",
    "WeatherForecastReportBuilder",
]

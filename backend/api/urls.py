"""API URL configuration."""
from __future__ import annotations

from typing import List, Optional

from django.urls import URLPattern, path

from backend.api.views import UserWeatherForecastsView, WeatherForecastDetailView, WeatherForecastView
from backend.core.services.forecast_service import ForecastService


def build_urlpatterns(service: Optional[ForecastService] = None) -> List[URLPattern]:
    """Routes bound to ``service``; without one the views use the settings-built service."""
    return [
        path("WeatherForecast", WeatherForecastView.as_view(service=service), name="weather-forecast"),
        path(
            "WeatherForecast/<uuid:forecast_id>",
            WeatherForecastDetailView.as_view(service=service),
            name="weather-forecast-detail",
        ),
        path(
            "WeatherForecast/<str:tenant_id>/<str:user_id>",
            UserWeatherForecastsView.as_view(service=service),
            name="weather-forecast-user-list",
        ),
    ]


urlpatterns = build_urlpatterns()

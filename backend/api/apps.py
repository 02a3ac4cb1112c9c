from __future__ import annotations

from django.apps import AppConfig


class ForecastApiConfig(AppConfig):
    name = "backend.api"
    label = "forecast_api"

    def ready(self) -> None:
        # connects the setting_changed receiver
        from backend.api import views  # noqa: F401

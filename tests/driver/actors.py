"""Actors: explicit per-user test entities holding their own context."""
from __future__ import annotations

from typing import Callable, List, Optional

from .app_driver import AppDriver
from .builders import WeatherForecastReportBuilder, any_identifier
from .forecast_api import ReportForecastResponse, RetrievedForecast, RetrievedForecasts

Customization = Callable[[WeatherForecastReportBuilder], WeatherForecastReportBuilder]


class User:
    """A user of one tenant reporting forecasts through the driver.

    The user remembers what it reported and the responses it got, so a test
    never has to ask the driver for "the last" anything.
    """

    def __init__(
        self,
        driver: AppDriver,
        tenant_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        self._driver = driver
        self.tenant_id = tenant_id or any_identifier()
        self.user_id = user_id or any_identifier()
        self._reported_forecasts: List[WeatherForecastReportBuilder] = []
        self._responses: List[ReportForecastResponse] = []

    def report_new_forecast(self, customize: Optional[Customization] = None) -> ReportForecastResponse:
        response = self.attempt_to_report_new_forecast(customize)
        response.should_be_successful()
        return response

    def attempt_to_report_new_forecast(self, customize: Optional[Customization] = None) -> ReportForecastResponse:
        forecast = self._new_forecast()
        if customize is not None:
            forecast = customize(forecast)
        self._reported_forecasts.append(forecast)
        response = self._driver.weather_forecast_api.attempt_to_report(forecast)
        self._responses.append(response)
        return response

    def retrieve_last_reported_forecast(self) -> RetrievedForecast:
        forecast_id = self.last_reported_forecast_response().get_id()
        return self._driver.weather_forecast_api.get_reported_forecast_by(forecast_id)

    def retrieve_all_reported_forecasts(self) -> RetrievedForecasts:
        return self._driver.weather_forecast_api.get_reported_forecasts_from(self.tenant_id, self.user_id)

    def last_reported_forecast(self) -> WeatherForecastReportBuilder:
        return self._reported_forecasts[-1]

    def all_reported_forecasts(self) -> List[WeatherForecastReportBuilder]:
        return list(self._reported_forecasts)

    def last_reported_forecast_response(self) -> ReportForecastResponse:
        return self._responses[-1]

    def close(self) -> None:
        for response in self._responses:
            response.close()

    def __enter__(self) -> "User":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _new_forecast(self) -> WeatherForecastReportBuilder:
        return WeatherForecastReportBuilder().with_tenant_id(self.tenant_id).with_user_id(self.user_id)


__all__ = ["User", "Customization"]

"""HTTP client for the external notification endpoint."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response

from backend.core.schemas import ForecastReportedEvent


logger = logging.getLogger(__name__)

NOTIFICATIONS_PATH = "/notifications"


class NotificationDeliveryError(RuntimeError):
    """Raised when the notification endpoint does not acknowledge a call."""


@dataclass
class RequestConfig:
    timeout: float = 2.0


class NotificationsClient:
    """Posts domain events to ``{base_url}/notifications``.

    Calls are bounded by ``RequestConfig.timeout`` and never retried.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()

    @property
    def notifications_url(self) -> str:
        return f"{self.base_url}{NOTIFICATIONS_PATH}"

    def notify_forecast_reported(self, event: ForecastReportedEvent) -> None:
        self._request("POST", self.notifications_url, json=event.to_wire())

    def close(self) -> None:
        self.session.close()

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            logger.error("Notification endpoint returned %s: %s", response.status_code, response.text)
            raise NotificationDeliveryError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            logger.error("Notification request to %s timed out", url)
            raise NotificationDeliveryError("timeout") from exc
        except requests.RequestException as exc:
            logger.error("Notification request to %s failed: %s", url, exc)
            raise NotificationDeliveryError("request failed") from exc
        return self._handle_response(response)


__all__ = ["NotificationsClient", "NotificationDeliveryError", "RequestConfig", "NOTIFICATIONS_PATH"]

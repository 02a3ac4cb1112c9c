"""In-memory forecast storage.

Forecasts live as long as the service instance that owns the repository.
Every mutation happens under a single lock so identifiers stay unique and a
listing always reflects the inserts that completed before it.
"""
from __future__ import annotations

from threading import Lock
from typing import Callable, Dict, List, Optional, Tuple
from uuid import UUID, uuid4

from backend.core.abstractions import StoredForecast
from backend.core.schemas import WeatherForecastReport


class InMemoryForecastRepository:
    """Stores accepted forecasts keyed by id and grouped by owner."""

    def __init__(self, id_factory: Callable[[], UUID] = uuid4) -> None:
        self._id_factory = id_factory
        self._forecasts: Dict[UUID, StoredForecast] = {}
        self._by_owner: Dict[Tuple[str, str], List[UUID]] = {}
        self._lock = Lock()

    def add(self, report: WeatherForecastReport) -> StoredForecast:
        with self._lock:
            forecast_id = self._allocate_id()
            stored = StoredForecast(id=forecast_id, report=report)
            self._forecasts[forecast_id] = stored
            self._by_owner.setdefault(stored.owner, []).append(forecast_id)
        return stored

    def get(self, forecast_id: UUID) -> Optional[StoredForecast]:
        with self._lock:
            return self._forecasts.get(forecast_id)

    def list_for(self, tenant_id: str, user_id: str) -> List[StoredForecast]:
        with self._lock:
            ids = list(self._by_owner.get((tenant_id, user_id), ()))
            return [self._forecasts[forecast_id] for forecast_id in ids]

    def __len__(self) -> int:
        with self._lock:
            return len(self._forecasts)

    def _allocate_id(self) -> UUID:
        forecast_id = self._id_factory()
        while forecast_id in self._forecasts:
            forecast_id = self._id_factory()
        return forecast_id


__all__ = ["InMemoryForecastRepository"]

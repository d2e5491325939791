"""
Dashboard State

Immutable dashboard snapshots and the reducer that produces them from
fetch events. Each refresh carries a generation number; results from an
older generation than the snapshot's are discarded as stale.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from air_dashboard.config import Config
from air_dashboard.services.aqi import calculate_aqi
from air_dashboard.services.location import Location, default_location
from air_dashboard.services.prediction import Prediction, generate_predictions
from air_dashboard.services.trends import TrendSeries, extract_trend

CITY_NOT_FOUND = 'City not found!'
FETCH_FAILED = 'Failed to fetch air quality or NASA data.'


@dataclass(frozen=True)
class DashboardSnapshot:
    location: Location = field(default_factory=default_location)
    generation: int = 0
    loading: bool = False
    readings: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    aqi: Optional[int] = None
    trend: TrendSeries = field(default_factory=TrendSeries)
    predictions: Tuple[Prediction, ...] = ()
    error: Optional[str] = None

    @property
    def has_data(self):
        return self.aqi is not None


@dataclass(frozen=True)
class FetchRequested:
    generation: int
    location: Location


@dataclass(frozen=True)
class FetchSucceeded:
    generation: int
    payload: Mapping[str, Any]


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    message: str = FETCH_FAILED


@dataclass(frozen=True)
class LocationNotFound:
    query: str


def _derive(payload):
    """Recompute every derived value from a successful fetch payload."""
    latest = payload.get('latest') or {}
    aqi = calculate_aqi(latest.get('pm2_5'), latest.get('pm10'))
    trend = extract_trend(payload.get('pm2_5'), payload.get('pm10'), window=Config.TREND_WINDOW)
    predictions = generate_predictions(aqi, days=Config.PREDICTION_DAYS,
                                       step=Config.PREDICTION_STEP, cap=Config.AQI_CAP)
    return {
        'readings': MappingProxyType(dict(payload.get('readings') or {})),
        'aqi': aqi,
        'trend': trend,
        'predictions': tuple(predictions)
    }


def reduce(snapshot, event):
    """Return the snapshot that results from applying `event` to `snapshot`.

    The input snapshot is never modified. Stale events come back as the
    unchanged snapshot.
    """
    if isinstance(event, FetchRequested):
        if event.generation <= snapshot.generation:
            return snapshot
        return replace(snapshot, generation=event.generation, location=event.location,
                       loading=True, error=None)

    if isinstance(event, FetchSucceeded):
        if event.generation != snapshot.generation:
            return snapshot
        return replace(snapshot, loading=False, error=None, **_derive(event.payload))

    if isinstance(event, FetchFailed):
        if event.generation != snapshot.generation:
            return snapshot
        return replace(snapshot, loading=False, error=event.message)

    if isinstance(event, LocationNotFound):
        return replace(snapshot, error=CITY_NOT_FOUND)

    raise TypeError(f'Unknown dashboard event: {event!r}')


def snapshot_to_dict(snapshot):
    """JSON-ready form of a snapshot."""
    return {
        'location': snapshot.location.to_dict(),
        'generation': snapshot.generation,
        'loading': snapshot.loading,
        'readings': dict(snapshot.readings),
        'aqi': snapshot.aqi,
        'trend': snapshot.trend.to_dict(),
        'predictions': [p._asdict() for p in snapshot.predictions],
        'error': snapshot.error
    }

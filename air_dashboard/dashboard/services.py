"""
Dashboard Services

Refresh orchestration, session-backed location memory and template
context builders for the dashboard.
"""

import logging
import math

from flask import session

from air_dashboard.services.aqi import calculate_aqi_status, get_aqi_level, get_health_advice
from air_dashboard.services.location import Location, default_location, resolve_location
from air_dashboard.services.realtime import fetch_air_quality
from air_dashboard.state import (DashboardSnapshot, FetchFailed, FetchRequested,
                                 FetchSucceeded, reduce, snapshot_to_dict)

logger = logging.getLogger(__name__)

# NASA POWER marks missing samples with this fill value
NASA_FILL_VALUE = -999

BACKGROUNDS = {
    'Good': 'https://cdn.pixabay.com/photo/2025/01/14/13/55/nature-9332892_640.jpg',
    'Moderate': 'https://cdn.pixabay.com/photo/2020/01/27/10/24/pollution-4796858_640.jpg',
    'Unhealthy for Sensitive Groups': 'https://cdn.pixabay.com/photo/2015/04/10/14/56/smoke-716322_640.jpg',
    'Unhealthy': 'https://cdn.pixabay.com/photo/2022/11/06/09/52/ai-generated-7573587_640.jpg',
    'Very Unhealthy': 'https://cdn.pixabay.com/photo/2022/11/06/09/52/ai-generated-7573587_640.jpg',
    'Hazardous': 'https://cdn.pixabay.com/photo/2022/11/06/09/52/ai-generated-7573587_640.jpg'
}

GRADIENTS = {
    'Good': 'linear-gradient(to right, #93c5fd, rgba(219, 234, 254, 0.3))',
    'Moderate': 'linear-gradient(to right, #eab308, rgba(253, 224, 71, 0.4))',
    'Unhealthy for Sensitive Groups': 'linear-gradient(to right, #c2410c, rgba(249, 115, 22, 0.5))',
    'Unhealthy': 'linear-gradient(to right, #991b1b, rgba(220, 38, 38, 0.6))',
    'Very Unhealthy': 'linear-gradient(to right, #581c87, rgba(126, 34, 206, 0.6))',
    'Hazardous': 'linear-gradient(to right, #000000, rgba(31, 41, 55, 0.7))'
}

PM25_COLOR = 'rgb(37, 99, 235)'
PM10_COLOR = 'rgb(59, 130, 246)'


def _display_level(aqi):
    # Missing or zero AQI is shown with the Good theme
    return get_aqi_level(aqi) if aqi else 'Good'


def background_for(aqi):
    return BACKGROUNDS[_display_level(aqi)]


def gradient_for(aqi):
    return GRADIENTS[_display_level(aqi)]


def visible_readings(readings):
    """Readings worth a card: drop missing, NaN and NASA fill values."""
    visible = {}
    for key, value in (readings or {}).items():
        if value is None or value == NASA_FILL_VALUE:
            continue
        if isinstance(value, float) and math.isnan(value):
            continue
        visible[key] = value
    return visible


def chart_data(trend):
    """Line and bar chart datasets for the PM trend window."""
    return {
        'line': {
            'labels': list(trend.labels),
            'datasets': [
                {'label': 'PM2.5', 'data': list(trend.pm2_5), 'borderColor': PM25_COLOR,
                 'backgroundColor': 'rgba(37, 99, 235, 0.3)', 'tension': 0.3, 'fill': True},
                {'label': 'PM10', 'data': list(trend.pm10), 'borderColor': PM10_COLOR,
                 'backgroundColor': 'rgba(59, 130, 246, 0.2)', 'tension': 0.3, 'fill': True}
            ]
        },
        'bar': {
            'labels': list(trend.labels),
            'datasets': [
                {'label': 'PM2.5', 'data': list(trend.pm2_5), 'backgroundColor': 'rgba(37, 99, 235, 0.7)'},
                {'label': 'PM10', 'data': list(trend.pm10), 'backgroundColor': 'rgba(59, 130, 246, 0.5)'}
            ]
        }
    }


def load_session_snapshot():
    """Starting snapshot for this client: last-known location and generation."""
    last_known = Location.from_dict(session.get('last_location'), source='last_known')
    return DashboardSnapshot(
        location=resolve_location(last_known, default_location()),
        generation=session.get('generation', 0)
    )


def remember_snapshot(snapshot):
    session['last_location'] = snapshot.location.to_dict()
    session['generation'] = snapshot.generation


def refresh_snapshot(previous, location, generation=None):
    """Run one refresh cycle for `location` and return the resulting snapshot.

    A request whose generation is not newer than `previous` is stale; it is
    not fetched and `previous` is returned unchanged.
    """
    if generation is None:
        generation = previous.generation + 1

    snapshot = reduce(previous, FetchRequested(generation, location))
    if snapshot is previous:
        logger.info('Discarding stale refresh %s (current %s)', generation, previous.generation)
        return previous

    result = fetch_air_quality(location.latitude, location.longitude)
    if result.get('error'):
        logger.warning('Refresh %s failed: %s', generation, result.get('message'))
        return reduce(snapshot, FetchFailed(generation))

    return reduce(snapshot, FetchSucceeded(generation, result))


def build_dashboard_context(snapshot):
    """Template context for the dashboard page."""
    return {
        'snapshot': snapshot,
        'location': snapshot.location,
        'aqi': snapshot.aqi,
        'status': calculate_aqi_status(snapshot.aqi),
        'health_advice': get_health_advice(snapshot.aqi) if snapshot.aqi else None,
        'background_url': background_for(snapshot.aqi),
        'gradient': gradient_for(snapshot.aqi),
        'readings': visible_readings(snapshot.readings),
        'trend': snapshot.trend,
        'charts': chart_data(snapshot.trend),
        'predictions': snapshot.predictions
    }


def build_api_payload(snapshot):
    """Snapshot JSON plus the display values the page needs to redraw itself."""
    body = snapshot_to_dict(snapshot)
    body['view'] = {
        'status': calculate_aqi_status(snapshot.aqi),
        'health_advice': get_health_advice(snapshot.aqi) if snapshot.aqi else None,
        'background_url': background_for(snapshot.aqi),
        'gradient': gradient_for(snapshot.aqi),
        'readings': visible_readings(snapshot.readings),
        'charts': chart_data(snapshot.trend)
    }
    return body

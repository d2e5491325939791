"""
Real-time Data Service

Integration with the Open-Meteo air quality API and the NASA POWER
hourly API. Requests run one after another; a failure in any step
aborts the refresh.
"""

import logging
from datetime import datetime, timedelta

import requests

from air_dashboard.config import Config
from air_dashboard.services.trends import valid_readings

logger = logging.getLogger(__name__)

NASA_FIELDS = {
    'temperature': 'T2M',
    'humidity': 'RH2M',
    'wind_speed': 'WS10M',
    'pressure': 'PS',
    'precipitation': 'PRECTOTCORR'
}


class DataFetchError(Exception):
    """An upstream data source failed or returned an unusable payload."""


def latest_values(hourly):
    """Map each hourly variable to its last valid value.

    Variables without any valid value are left out, as is the time axis.
    """
    latest = {}
    for param, values in (hourly or {}).items():
        if param == 'time' or not isinstance(values, list):
            continue
        valid = valid_readings(values)
        if valid:
            latest[param] = valid[-1]
    return latest


def get_air_quality_open_meteo(lat, lon, hourly_vars=None):
    """Fetch hourly air quality data from Open-Meteo for given coordinates."""
    if hourly_vars is None:
        hourly_vars = Config.AIR_QUALITY_HOURLY_VARIABLES

    params = {
        'latitude': lat,
        'longitude': lon,
        'hourly': ','.join(hourly_vars)
    }

    resp = requests.get(Config.OPEN_METEO_AIR_QUALITY_URL, params=params,
                        timeout=Config.REQUEST_TIMEOUT)
    if resp.status_code != 200:
        raise DataFetchError(f'Open-Meteo error {resp.status_code}')

    hourly = resp.json().get('hourly')
    if not isinstance(hourly, dict):
        raise DataFetchError('Open-Meteo response has no hourly data')

    logger.debug('Open-Meteo returned %d hourly variables for %s,%s', len(hourly), lat, lon)
    return hourly


def get_nasa_power(lat, lon, day=None):
    """Fetch the latest hourly atmospheric values from NASA POWER.

    `day` defaults to today (UTC) minus the configured publication lag.
    """
    if day is None:
        day = datetime.utcnow().date() - timedelta(days=Config.NASA_POWER_LAG_DAYS)
    date_str = day.strftime('%Y%m%d')

    params = {
        'parameters': ','.join(Config.NASA_POWER_PARAMETERS),
        'community': 'RE',
        'longitude': lon,
        'latitude': lat,
        'start': date_str,
        'end': date_str,
        'format': 'JSON'
    }

    resp = requests.get(Config.NASA_POWER_URL, params=params, timeout=Config.REQUEST_TIMEOUT)
    if resp.status_code != 200:
        raise DataFetchError(f'NASA POWER error {resp.status_code}')

    data = resp.json() or {}
    parameters = (data.get('properties') or {}).get('parameter') or {}

    result = {}
    for key, code in NASA_FIELDS.items():
        series = parameters.get(code)
        result[key] = list(series.values())[-1] if series else None

    logger.debug('NASA POWER values for %s,%s on %s: %s', lat, lon, date_str, result)
    return result


def fetch_air_quality(lat, lon):
    """Get current air quality and atmospheric data for a position.

    Returns a dict with the merged latest readings and the PM histories,
    or an error dict when any step fails.
    """
    try:
        hourly = get_air_quality_open_meteo(lat, lon)
        latest = latest_values(hourly)

        nasa_latest = get_nasa_power(lat, lon)

        # Atmospheric values win on key collisions
        readings = dict(latest)
        readings.update(nasa_latest)

        return {
            'error': False,
            'latitude': lat,
            'longitude': lon,
            'latest': latest,
            'readings': readings,
            'pm2_5': list(hourly.get('pm2_5') or []),
            'pm10': list(hourly.get('pm10') or []),
            'timestamp': datetime.utcnow().isoformat()
        }

    except requests.exceptions.Timeout:
        logger.warning('Air quality request timed out for %s,%s', lat, lon)
        return {'error': True, 'message': 'Request timed out'}
    except DataFetchError as e:
        logger.warning('Air quality fetch failed for %s,%s: %s', lat, lon, e)
        return {'error': True, 'message': str(e)}
    except requests.exceptions.RequestException as e:
        logger.warning('Air quality request failed for %s,%s: %s', lat, lon, e)
        return {'error': True, 'message': str(e)}
    except (ValueError, AttributeError, TypeError) as e:
        logger.exception('Malformed upstream payload for %s,%s', lat, lon)
        return {'error': True, 'message': f'Malformed response: {e}'}

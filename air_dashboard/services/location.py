"""
Location Service

Coordinate source chain and city geocoding through Nominatim.
"""

import logging
from dataclasses import dataclass

import requests

from air_dashboard.config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """A named WGS84 position and where it came from."""
    city: str
    latitude: float
    longitude: float
    source: str = 'default'

    @property
    def coords(self):
        return (self.latitude, self.longitude)

    def to_dict(self):
        return {
            'city': self.city,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'source': self.source
        }

    @classmethod
    def from_dict(cls, data, source=None):
        """Rebuild a Location from a dict, or None if it is incomplete or invalid."""
        if not data:
            return None
        try:
            return cls(
                city=data.get('city') or '',
                latitude=float(data['latitude']),
                longitude=float(data['longitude']),
                source=source or data.get('source') or 'default'
            )
        except (KeyError, TypeError, ValueError):
            return None


def default_location():
    return Location(
        city=Config.DEFAULT_CITY,
        latitude=Config.DEFAULT_LATITUDE,
        longitude=Config.DEFAULT_LONGITUDE,
        source='default'
    )


def resolve_location(*candidates):
    """Return the first available location, in priority order.

    Callers pass geolocation first, then the last-known location, then the
    default.
    """
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def geocode_city(city_name):
    """Look up coordinates for a city name.

    Returns a Location on a hit and None when the city is unknown or the
    lookup fails.
    """
    name = (city_name or '').strip()
    if not name:
        return None

    params = {'format': 'json', 'q': name, 'limit': 1}
    headers = {'User-Agent': Config.NOMINATIM_USER_AGENT}

    try:
        resp = requests.get(Config.NOMINATIM_URL, params=params, headers=headers,
                            timeout=Config.REQUEST_TIMEOUT)
        if resp.status_code != 200:
            logger.warning('Geocoding error %s for %r', resp.status_code, name)
            return None

        results = resp.json()
        if not results:
            logger.info('City %r not found', name)
            return None

        return Location(
            city=name,
            latitude=float(results[0]['lat']),
            longitude=float(results[0]['lon']),
            source='search'
        )

    except requests.exceptions.Timeout:
        logger.warning('Geocoding request timed out for %r', name)
        return None
    except requests.exceptions.RequestException as e:
        logger.warning('Geocoding request failed for %r: %s', name, e)
        return None
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning('Malformed geocoding response for %r: %s', name, e)
        return None

"""
Services Package

Exports all services for easy importing.
"""

from air_dashboard.services.aqi import calculate_aqi, calculate_sub_index, calculate_aqi_status, get_aqi_level, get_health_advice
from air_dashboard.services.trends import TrendSeries, extract_trend
from air_dashboard.services.prediction import Prediction, generate_predictions
from air_dashboard.services.location import Location, default_location, resolve_location, geocode_city
from air_dashboard.services.realtime import DataFetchError, fetch_air_quality, get_air_quality_open_meteo, get_nasa_power

__all__ = [
    'calculate_aqi',
    'calculate_sub_index',
    'calculate_aqi_status',
    'get_aqi_level',
    'get_health_advice',
    'TrendSeries',
    'extract_trend',
    'Prediction',
    'generate_predictions',
    'Location',
    'default_location',
    'resolve_location',
    'geocode_city',
    'DataFetchError',
    'fetch_air_quality',
    'get_air_quality_open_meteo',
    'get_nasa_power'
]

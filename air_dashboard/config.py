"""
Configuration settings for the Air Quality Dashboard
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions (last-known location and flash messages)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Open-Meteo air quality endpoint
    OPEN_METEO_AIR_QUALITY_URL = 'https://air-quality-api.open-meteo.com/v1/air-quality'
    AIR_QUALITY_HOURLY_VARIABLES = [
        'pm10', 'pm2_5', 'carbon_monoxide', 'nitrogen_dioxide', 'sulphur_dioxide',
        'ozone', 'carbon_dioxide', 'ammonia', 'aerosol_optical_depth', 'methane',
        'dust', 'uv_index', 'uv_index_clear_sky', 'alder_pollen', 'birch_pollen',
        'grass_pollen', 'mugwort_pollen', 'olive_pollen', 'ragweed_pollen'
    ]

    # NASA POWER hourly point data
    NASA_POWER_URL = 'https://power.larc.nasa.gov/api/temporal/hourly/point'
    NASA_POWER_PARAMETERS = ['T2M', 'RH2M', 'WS10M', 'PS', 'PRECTOTCORR']
    # Hourly data for the current day is published with a delay
    NASA_POWER_LAG_DAYS = int(os.environ.get('NASA_POWER_LAG_DAYS') or 1)

    # Nominatim requires an identifying User-Agent
    NOMINATIM_URL = 'https://nominatim.openstreetmap.org/search'
    NOMINATIM_USER_AGENT = os.environ.get('NOMINATIM_USER_AGENT') or 'air-quality-dashboard/1.0'

    REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT') or 10)

    # Application settings
    DEFAULT_CITY = 'Islamabad'
    DEFAULT_LATITUDE = 33.6844
    DEFAULT_LONGITUDE = 73.0479

    TREND_WINDOW = 7
    PREDICTION_DAYS = 3
    PREDICTION_STEP = 10
    AQI_CAP = 500


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    LOG_LEVEL = 'DEBUG'

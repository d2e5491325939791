from air_dashboard.dashboard.services import (BACKGROUNDS, GRADIENTS, background_for, chart_data,
                                              gradient_for, refresh_snapshot, visible_readings)
from air_dashboard.services.location import Location
from air_dashboard.services.trends import extract_trend
from air_dashboard.state import DashboardSnapshot

KARACHI = Location(city='Karachi', latitude=24.86, longitude=67.0, source='search')


def test_visible_readings_drop_missing_and_fill_values():
    readings = {'pm2_5': 12.0, 'pressure': -999, 'humidity': None,
                'wind_speed': float('nan'), 'uv_index': 0}
    assert visible_readings(readings) == {'pm2_5': 12.0, 'uv_index': 0}


def test_theme_tokens_follow_aqi_tier():
    assert background_for(None) == BACKGROUNDS['Good']
    assert gradient_for(0) == GRADIENTS['Good']
    assert gradient_for(75) == GRADIENTS['Moderate']
    assert gradient_for(350) == GRADIENTS['Hazardous']
    assert background_for(120) == BACKGROUNDS['Unhealthy for Sensitive Groups']


def test_chart_data_uses_trend_series():
    charts = chart_data(extract_trend([1, 2, 3], [4, 5]))
    assert charts['line']['labels'] == ['Hour 1', 'Hour 2', 'Hour 3']
    assert charts['line']['datasets'][0]['data'] == [1, 2, 3]
    assert charts['bar']['datasets'][1]['data'] == [4, 5]


def test_refresh_snapshot_stale_generation_skips_fetch(monkeypatch):
    def fail(lat, lon):
        raise AssertionError('should not fetch')

    monkeypatch.setattr('air_dashboard.dashboard.services.fetch_air_quality', fail)

    previous = DashboardSnapshot(generation=4)
    assert refresh_snapshot(previous, KARACHI, generation=2) is previous


def test_refresh_snapshot_increments_generation(monkeypatch):
    monkeypatch.setattr('air_dashboard.dashboard.services.fetch_air_quality',
                        lambda lat, lon: {'error': False, 'latest': {'pm10': 54},
                                          'readings': {'pm10': 54}, 'pm2_5': [], 'pm10': [54]})

    snapshot = refresh_snapshot(DashboardSnapshot(generation=1), KARACHI)
    assert snapshot.generation == 2
    assert snapshot.location == KARACHI
    assert snapshot.aqi == 50
    assert snapshot.loading is False

import dataclasses

import pytest

from air_dashboard.services.location import Location
from air_dashboard.state import (CITY_NOT_FOUND, FETCH_FAILED, DashboardSnapshot, FetchFailed,
                                 FetchRequested, FetchSucceeded, LocationNotFound, reduce,
                                 snapshot_to_dict)

LAHORE = Location(city='Lahore', latitude=31.5204, longitude=74.3587, source='search')

PAYLOAD = {
    'error': False,
    'latest': {'pm2_5': 12.0},
    'readings': {'pm2_5': 12.0, 'temperature': 28.4},
    'pm2_5': [10.0, None, 11.0, 12.0],
    'pm10': []
}


def _requested(generation=1, snapshot=None):
    return reduce(snapshot or DashboardSnapshot(), FetchRequested(generation, LAHORE))


def test_fetch_requested_starts_loading():
    snapshot = _requested()
    assert snapshot.generation == 1
    assert snapshot.loading is True
    assert snapshot.location == LAHORE


def test_older_request_is_ignored():
    current = _requested(generation=3)
    assert reduce(current, FetchRequested(2, LAHORE)) is current
    assert reduce(current, FetchRequested(3, LAHORE)) is current


def test_success_recomputes_everything():
    snapshot = reduce(_requested(), FetchSucceeded(1, PAYLOAD))

    assert snapshot.loading is False
    assert snapshot.aqi == 50
    assert snapshot.readings == {'pm2_5': 12.0, 'temperature': 28.4}
    assert snapshot.trend.pm2_5 == (10.0, 11.0, 12.0)
    assert snapshot.predictions == (('Day 1', 50), ('Day 2', 60), ('Day 3', 70))


def test_missing_pollutants_fall_back_to_zero():
    payload = dict(PAYLOAD, latest={})
    snapshot = reduce(_requested(), FetchSucceeded(1, payload))
    assert snapshot.aqi == 0
    assert len(snapshot.predictions) == 3


def test_stale_result_is_discarded():
    first = _requested(generation=1)
    second = reduce(first, FetchRequested(2, LAHORE))

    assert reduce(second, FetchSucceeded(1, PAYLOAD)) is second
    assert reduce(second, FetchFailed(1)) is second


def test_failure_keeps_previous_data():
    loaded = reduce(_requested(), FetchSucceeded(1, PAYLOAD))
    retry = reduce(loaded, FetchRequested(2, LAHORE))
    failed = reduce(retry, FetchFailed(2))

    assert failed.error == FETCH_FAILED
    assert failed.loading is False
    assert failed.aqi == loaded.aqi


def test_location_not_found_only_sets_notice():
    loaded = reduce(_requested(), FetchSucceeded(1, PAYLOAD))
    snapshot = reduce(loaded, LocationNotFound('Atlantis'))

    assert snapshot.error == CITY_NOT_FOUND
    assert snapshot.location == loaded.location
    assert snapshot.generation == loaded.generation


def test_snapshots_are_immutable():
    original = DashboardSnapshot()
    updated = _requested(snapshot=original)

    assert original.generation == 0
    assert updated is not original
    with pytest.raises(dataclasses.FrozenInstanceError):
        updated.aqi = 10

    loaded = reduce(updated, FetchSucceeded(1, PAYLOAD))
    with pytest.raises(TypeError):
        loaded.readings['pm2_5'] = 1.0


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        reduce(DashboardSnapshot(), object())


def test_snapshot_to_dict():
    data = snapshot_to_dict(reduce(_requested(), FetchSucceeded(1, PAYLOAD)))

    assert data['aqi'] == 50
    assert data['location']['city'] == 'Lahore'
    assert data['predictions'][0] == {'day': 'Day 1', 'aqi': 50}
    assert data['trend']['labels'] == ['Hour 1', 'Hour 2', 'Hour 3']
    assert data['error'] is None

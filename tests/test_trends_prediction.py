from air_dashboard.services.prediction import generate_predictions
from air_dashboard.services.trends import TrendSeries, extract_trend


def test_trend_filters_and_trims_each_series():
    trend = extract_trend([1, 2, None, 3, 4, 5, 6, 7, 8], [10, 20, 30, 40, 50])

    assert trend.pm2_5 == (2, 3, 4, 5, 6, 7, 8)
    assert trend.pm10 == (10, 20, 30, 40, 50)
    assert len(trend.labels) == len(trend.pm2_5) == 7
    assert trend.labels[0] == 'Hour 1'
    assert trend.labels[-1] == 'Hour 7'


def test_trend_drops_nan_readings():
    trend = extract_trend([float('nan'), 4.0, None, 5.5], [None, float('nan')])
    assert trend.pm2_5 == (4.0, 5.5)
    assert trend.pm10 == ()
    assert trend.labels == ('Hour 1', 'Hour 2')


def test_trend_labels_follow_pm25_when_pm10_longer():
    trend = extract_trend([1, None, 2], [1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert trend.pm2_5 == (1, 2)
    assert trend.pm10 == (3, 4, 5, 6, 7, 8, 9)
    assert len(trend.labels) == len(trend.pm2_5) == 2
    assert trend.labels == ('Hour 1', 'Hour 2')


def test_trend_without_pm25_has_no_labels():
    trend = extract_trend([None, float('nan')], [10, 20])
    assert trend.labels == ()
    assert trend.pm10 == (10, 20)
    assert len(trend) == 0


def test_trend_empty_history():
    trend = extract_trend([], None)
    assert trend == TrendSeries()
    assert len(trend) == 0
    assert trend.points == []


def test_predictions_climb_linearly():
    assert generate_predictions(100) == [('Day 1', 100), ('Day 2', 110), ('Day 3', 120)]


def test_predictions_capped_at_500():
    assert generate_predictions(495) == [('Day 1', 495), ('Day 2', 500), ('Day 3', 500)]


def test_predictions_require_current_aqi():
    assert generate_predictions(None) == []
    assert len(generate_predictions(0)) == 3
    assert generate_predictions(0)[0].day == 'Day 1'

"""
Trend Extraction Service

Recent PM2.5 / PM10 windows for the dashboard charts.
"""

import math
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(frozen=True)
class TrendSeries:
    """Chronological trend window; pm2_5 and pm10 may differ in length."""
    labels: tuple = ()
    pm2_5: tuple = ()
    pm10: tuple = ()

    @property
    def points(self):
        """(label, pm2_5, pm10) triples, None where a series is shorter."""
        return list(zip_longest(self.labels, self.pm2_5, self.pm10))

    def __len__(self):
        return len(self.labels)

    def to_dict(self):
        return {
            'labels': list(self.labels),
            'pm2_5': list(self.pm2_5),
            'pm10': list(self.pm10)
        }


def is_valid_reading(value):
    """True for numeric readings that are neither missing nor NaN."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def valid_readings(values):
    return [v for v in (values or []) if is_valid_reading(v)]


def extract_trend(pm25_history, pm10_history, window=7):
    """Build the trend window from full hourly histories.

    Missing and NaN entries are dropped from each pollutant independently,
    then the last `window` valid values of each are kept. Labels are derived
    from the PM2.5 window only; PM10 may be shorter or longer.
    """
    pm2_5 = valid_readings(pm25_history)[-window:] if window > 0 else []
    pm10 = valid_readings(pm10_history)[-window:] if window > 0 else []

    labels = [f'Hour {i + 1}' for i in range(len(pm2_5))]

    return TrendSeries(labels=tuple(labels), pm2_5=tuple(pm2_5), pm10=tuple(pm10))

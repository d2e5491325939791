"""
AQI Prediction Service

Naive multi-day projection: a capped linear climb from the current AQI.
No history, seasonality or weather input is used.
"""

from collections import namedtuple

Prediction = namedtuple('Prediction', ['day', 'aqi'])


def generate_predictions(current_aqi, days=3, step=10, cap=500):
    """Project the AQI forward `days` days.

    predicted[i] = min(current_aqi + i * step, cap), labelled "Day 1".."Day N".
    Returns an empty list when the current AQI is undefined.
    """
    if current_aqi is None:
        return []

    return [
        Prediction(day=f'Day {i + 1}', aqi=min(current_aqi + i * step, cap))
        for i in range(days)
    ]

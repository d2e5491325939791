"""
AQI Calculation Services

EPA-style AQI calculations, severity tiers and health advice.
"""

import math


# (c_low, c_high, i_low, i_high), ug/m3
PM25_BREAKPOINTS = [
    (0, 12.0, 0, 50),
    (12.1, 35.4, 51, 100),
    (35.5, 55.4, 101, 150),
    (55.5, 150.4, 151, 200),
    (150.5, 250.4, 201, 300),
    (250.5, 350.4, 301, 400),
    (350.5, 500.0, 401, 500)
]

PM10_BREAKPOINTS = [
    (0, 54, 0, 50),
    (55, 154, 51, 100),
    (155, 254, 101, 150),
    (255, 354, 151, 200),
    (355, 424, 201, 300),
    (425, 504, 301, 400),
    (505, 604, 401, 500)
]

# Upper bound (inclusive), level, css color token, EPA hex color, description
AQI_TIERS = [
    (50, 'Good', 'success', '#00e400', 'Air quality is satisfactory'),
    (100, 'Moderate', 'warning', '#ffff00', 'Air quality is acceptable'),
    (150, 'Unhealthy for Sensitive Groups', 'orange', '#ff7e00',
     'Sensitive individuals should limit outdoor activity'),
    (200, 'Unhealthy', 'danger', '#ff0000', 'Everyone may experience health effects'),
    (300, 'Very Unhealthy', 'purple', '#8f3f97', 'Health alert: serious effects possible'),
    (None, 'Hazardous', 'dark', '#7e0023', 'Health warning of emergency conditions')
]

HEALTH_ADVICE = {
    'Good': 'Air quality is good. Enjoy outdoor activities!',
    'Moderate': 'Moderate air quality. Sensitive people should limit outdoor activity.',
    'Unhealthy for Sensitive Groups': 'Unhealthy for sensitive groups. Avoid outdoor exercise.',
    'Unhealthy': 'Unhealthy air! Stay indoors with filtered air.',
    'Very Unhealthy': 'Very unhealthy! Avoid going outside and use air purifiers.',
    'Hazardous': 'Hazardous air! Remain indoors, keep windows closed and run air purifiers.'
}


def round_half_up(value):
    """Round to the nearest integer, ties going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def calculate_sub_index(concentration, breakpoints):
    """Interpolate a single pollutant concentration against its breakpoint table.

    Returns None when the concentration is missing or falls outside every
    segment. Values are never clamped. A concentration on a shared boundary
    resolves to the first matching segment in table order.
    """
    if concentration is None:
        return None

    for bp_lo, bp_hi, aqi_lo, aqi_hi in breakpoints:
        if bp_lo <= concentration <= bp_hi:
            aqi = ((aqi_hi - aqi_lo) / (bp_hi - bp_lo)) * (concentration - bp_lo) + aqi_lo
            return round_half_up(aqi)

    return None


def calculate_aqi(pm25, pm10=None):
    """Calculate the combined AQI from PM2.5 and PM10 concentrations.

    The reported value is the larger of the two sub-indices, with a missing
    sub-index counted as 0. When neither pollutant has a usable reading the
    result is therefore 0.
    """
    aqi_pm25 = calculate_sub_index(pm25, PM25_BREAKPOINTS)
    aqi_pm10 = calculate_sub_index(pm10, PM10_BREAKPOINTS)

    return max(aqi_pm25 or 0, aqi_pm10 or 0)


def get_aqi_level(aqi):
    """Map an AQI value to its severity tier label."""
    if aqi is None:
        return 'No Data'
    for upper, level, _color, _hex, _description in AQI_TIERS:
        if upper is None or aqi <= upper:
            return level


def calculate_aqi_status(aqi):
    """Get human-readable status from an AQI value"""
    if aqi is None:
        return {
            'level': 'No Data',
            'color': 'secondary',
            'hex': '#6c757d',
            'description': 'Air quality data not available'
        }

    for upper, level, color, hex_color, description in AQI_TIERS:
        if upper is None or aqi <= upper:
            return {
                'level': level,
                'color': color,
                'hex': hex_color,
                'description': description
            }


def get_health_advice(aqi):
    """Return the health advisory sentence for an AQI value, or None without data."""
    if aqi is None:
        return None
    return HEALTH_ADVICE[get_aqi_level(aqi)]

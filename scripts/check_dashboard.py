"""Smoke check: refresh the dashboard for a city against the live APIs.

Usage:
    python scripts/check_dashboard.py [city]
"""
import sys
sys.path.insert(0, '.')
from air_dashboard import create_app

city = sys.argv[1] if len(sys.argv) > 1 else 'Islamabad'
app = create_app()

with app.test_client() as client:
    r = client.get('/api/dashboard', query_string={'city': city})
    print('api status', r.status_code)
    data = r.get_json()
    if r.status_code != 200:
        print('error:', data.get('message'))
        sys.exit(1)

    location = data['location']
    print(f"{location['city']} ({location['latitude']}, {location['longitude']})")
    print('AQI:', data['aqi'])
    print('trend points:', len(data['trend']['labels']))
    for p in data['predictions']:
        print(f"  {p['day']}: {p['aqi']}")

    r = client.get('/', query_string={'city': city})
    text = r.get_data(as_text=True)
    print('dashboard status', r.status_code)
    print('health advice present:', 'd-none" id="advice-section"' not in text)

"""
Dashboard Routes

HTML dashboard and JSON refresh endpoint.
"""

from flask import flash, jsonify, render_template, request

from air_dashboard.dashboard import dashboard_bp
from air_dashboard.dashboard.services import (build_api_payload, build_dashboard_context, load_session_snapshot,
                                              refresh_snapshot, remember_snapshot)
from air_dashboard.services.location import Location, geocode_city
from air_dashboard.state import LocationNotFound, reduce


@dashboard_bp.route('/')
def index():
    """Dashboard for a searched city, or the last-known / default location"""
    snapshot = load_session_snapshot()
    location = snapshot.location

    city = request.args.get('city', '').strip()
    if city:
        found = geocode_city(city)
        if found:
            location = found
        else:
            snapshot = reduce(snapshot, LocationNotFound(city))
            flash(snapshot.error, 'danger')

    snapshot = refresh_snapshot(snapshot, location)
    if snapshot.error:
        flash(snapshot.error, 'danger')

    remember_snapshot(snapshot)
    return render_template('dashboard/index.html',
                           city=city or snapshot.location.city,
                           **build_dashboard_context(snapshot))


@dashboard_bp.route('/api/dashboard')
def api_dashboard():
    """Return a refreshed snapshot as JSON.

    Query Parameters:
        lat, lon: browser geolocation coordinates
        city: city name to geocode (used when no coordinates are given)
        generation: client request counter; stale requests are not fetched
    """
    snapshot = load_session_snapshot()
    generation = request.args.get('generation', type=int)

    lat = request.args.get('lat')
    lon = request.args.get('lon')
    city = request.args.get('city', '').strip()

    if lat is not None or lon is not None:
        location = Location.from_dict({'city': city or 'Your location', 'latitude': lat, 'longitude': lon},
                                      source='geolocation')
        if location is None or not (-90 <= location.latitude <= 90 and -180 <= location.longitude <= 180):
            return jsonify({'error': True, 'message': 'Invalid coordinates', 'generation': generation}), 400
    elif city:
        location = geocode_city(city)
        if location is None:
            snapshot = reduce(snapshot, LocationNotFound(city))
            return jsonify({'error': True, 'message': snapshot.error, 'generation': generation}), 404
    else:
        location = snapshot.location

    previous = snapshot
    snapshot = refresh_snapshot(snapshot, location, generation)
    stale = snapshot is previous

    if not stale:
        remember_snapshot(snapshot)

    body = build_api_payload(snapshot)
    body['stale'] = stale
    if snapshot.error and not stale:
        body['message'] = snapshot.error
        return jsonify(body), 502
    return jsonify(body)

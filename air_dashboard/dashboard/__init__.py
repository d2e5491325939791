"""
Dashboard Blueprint
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from air_dashboard.dashboard import routes  # noqa: E402, F401

"""
api.routes_health - /api/v1/health liveness probe.
"""

from flask import jsonify

from api import api_bp
from db import check_connection


@api_bp.route("/health")
def health():
    if not check_connection():
        return jsonify({"status": "degraded", "database": "down"}), 503
    return jsonify({"status": "ok", "database": "up"})

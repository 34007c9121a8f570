"""Prometheus exposition endpoint, scraped by an external collector."""

from flask import Blueprint, Response

from hash_app.metrics import get_metrics

metrics_bp = Blueprint("metrics", __name__)


@metrics_bp.route("/metrics", methods=["GET"])
def metrics() -> Response:
    """Return every registered metric in the Prometheus text format."""
    payload, content_type = get_metrics().render()
    return Response(payload, status=200, content_type=content_type)

"""
Benchmark API endpoints.

Endpoints:
    GET /hash    - Chained SHA-256 digest as a HashResult JSON document
    GET /health  - Liveness/readiness probe

Any other path or method is answered by the error handlers at the bottom
of this module with a JSON client error.
"""

import logging

from flask import Blueprint, Response, current_app, jsonify
from werkzeug.exceptions import HTTPException

from hash_app.hashing import DigestError, compute_hash
from hash_app.metrics import get_metrics
from hash_app.models import HashResult

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/hash", methods=["GET"])
def get_hash() -> tuple[Response, int]:
    """
    Compute the chained digest and return it with a timestamp and source label.

    Returns:
        JSON response ``{"hash", "timestamp", "source"}`` and 200 status code.
    """
    metrics = get_metrics()
    with metrics.hash_duration.time():
        hash_value = compute_hash()
    metrics.hash_computations.inc()

    result = HashResult.create(hash_value, current_app.config["SOURCE_LABEL"])
    logger.debug("Computed %r", result)

    return jsonify(result.to_dict(current_app.config["TIMESTAMP_FORMAT"])), 200


@api_bp.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint for readiness and liveness probes."""
    return Response("OK", status=200, mimetype="text/plain")


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.app_errorhandler(404)
def not_found(error: HTTPException) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error: HTTPException) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    response = jsonify({"error": "Method not allowed"})
    valid_methods = getattr(error, "valid_methods", None)
    if valid_methods:
        response.headers["Allow"] = ", ".join(valid_methods)
    return response, 405


@api_bp.app_errorhandler(DigestError)
def digest_failure(error: DigestError) -> tuple[Response, int]:
    """Digest primitive failures are platform bugs, not client errors."""
    logger.exception("Digest computation failed: %s", error)
    return jsonify({"error": "Internal server error"}), 500


@api_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500

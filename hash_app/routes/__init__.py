"""
Routes package for the hash benchmark service.

This package contains route blueprints:
- api: the /hash and /health endpoints plus application-wide error handlers
- metrics: the Prometheus exposition endpoint
"""

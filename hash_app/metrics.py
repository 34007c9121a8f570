"""
Prometheus metrics for the hash benchmark service.

A ``ServiceMetrics`` instance owns its own ``CollectorRegistry`` and is
attached to the Flask application at start-up (``app.extensions``), so
request handlers reach it through the application rather than through a
module-level global.  Request counting and latency are recorded by
request hooks; the ``/hash`` view additionally times the digest chain.
"""

from __future__ import annotations

import logging
import threading
import time

from flask import Flask, Response, current_app, g, request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
    start_http_server,
)

logger = logging.getLogger(__name__)

EXTENSION_KEY = "metrics"

# Label used for requests that did not match any route (404/405), so
# random paths cannot blow up label cardinality.
UNMATCHED_ENDPOINT = "unmatched"

# The digest chain finishes well under a millisecond on modern CPUs, so the
# default Prometheus buckets would put nearly every sample in the first one.
LATENCY_BUCKETS = (
    0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.005,
    0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5,
)


class ServiceMetrics:
    """Registry handle holding every metric the service exposes."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        # Runtime-native collectors: process_*, python_info, python_gc_*.
        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests handled",
            ["method", "endpoint", "http_status"],
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds",
            ["method", "endpoint"],
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )
        self.requests_in_progress = Gauge(
            "http_requests_in_progress",
            "Number of HTTP requests currently being handled",
            registry=self.registry,
        )
        self.hash_computations = Counter(
            "hash_computations_total",
            "Number of chained digest computations performed",
            registry=self.registry,
        )
        self.hash_duration = Histogram(
            "hash_computation_duration_seconds",
            "Time spent computing the chained digest",
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )
        # Closest Python analogue of go_goroutines: live threads serving
        # requests under a threaded WSGI server.
        self.threads_active = Gauge(
            "python_threads_active",
            "Number of live Python threads in the process",
            registry=self.registry,
        )
        self.threads_active.set_function(threading.active_count)

    def render(self) -> tuple[bytes, str]:
        """Return the text exposition payload and its content type."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST


def get_metrics(app: Flask | None = None) -> ServiceMetrics:
    """Return the metrics handle attached to ``app`` (or the current app)."""
    target = app if app is not None else current_app
    return target.extensions[EXTENSION_KEY]


def _endpoint_label() -> str:
    rule = request.url_rule
    return rule.rule if rule is not None else UNMATCHED_ENDPOINT


def _is_scrape() -> bool:
    return request.blueprint == "metrics"


def _before_request() -> None:
    if _is_scrape():
        return
    get_metrics().requests_in_progress.inc()
    g.metrics_started_at = time.perf_counter()


def _after_request(response: Response) -> Response:
    started_at = g.get("metrics_started_at")
    if started_at is None:
        return response

    metrics = get_metrics()
    endpoint = _endpoint_label()
    metrics.request_duration.labels(request.method, endpoint).observe(
        time.perf_counter() - started_at
    )
    metrics.requests_total.labels(request.method, endpoint, str(response.status_code)).inc()
    return response


def _teardown_request(error: BaseException | None) -> None:
    # Runs even when the response could not be produced.
    if g.pop("metrics_started_at", None) is not None:
        get_metrics().requests_in_progress.dec()


def init_metrics(app: Flask, registry: CollectorRegistry | None = None) -> ServiceMetrics:
    """
    Create the metrics handle for ``app`` and install request hooks.

    Args:
        app: Flask application to instrument.
        registry: Optional registry to populate; a fresh one is created
            when omitted, so several apps can coexist in one process.

    Returns:
        The ``ServiceMetrics`` instance stored on the application.
    """
    metrics = ServiceMetrics(registry)
    app.extensions[EXTENSION_KEY] = metrics
    app.before_request(_before_request)
    app.after_request(_after_request)
    app.teardown_request(_teardown_request)
    return metrics


def start_metrics_server(metrics: ServiceMetrics, port: int, addr: str = "0.0.0.0") -> None:
    """Serve ``metrics`` on a dedicated port from a daemon thread."""
    start_http_server(port, addr=addr, registry=metrics.registry)
    logger.info("Prometheus metrics server listening on %s:%s", addr, port)

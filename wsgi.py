"""WSGI entry point for the hash benchmark service."""

import os

from hash_app import create_app
from hash_app.metrics import get_metrics, start_metrics_server

app = create_app(os.getenv("FLASK_ENV", "production"))

if app.config["METRICS_PORT"] > 0:
    start_metrics_server(get_metrics(app), app.config["METRICS_PORT"])


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=True)

"""Production server startup script for the BiteLogs API.

This module provides the entry point for starting the Django application
with Gunicorn in production environments (Docker containers, Kubernetes).
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the BiteLogs API using Gunicorn.

    Configures and launches Gunicorn with production-ready settings:
    - Binds to 0.0.0.0 on $PORT (default 8000) for container accessibility
    - Uses $GUNICORN_WORKERS worker processes (default 4)
    - 2 threads per worker for improved throughput
    - 60-second timeout, enough for image uploads
    - Logs to stdout/stderr for container log aggregation
    """
    sys.argv = [
        "gunicorn",
        "bitelogs_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        "2",
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()

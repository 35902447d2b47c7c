"""LoveCakes Storefront Load Testing: Locust entry point.

Seed a shared database first (``PROTEAN_ENV=production python src/manage.py seed``),
then point Locust at the running API.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Shoppers only:
    locust -f loadtests/locustfile.py CartUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py CartUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.browsing import BrowsingUser  # noqa: F401
from loadtests.scenarios.cart import CartUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the envelope's error code and message so you see
    "VALIDATION_ERROR: sizeNotAvailable" instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(**_kwargs):
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}\n")

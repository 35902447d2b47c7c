"""Catalogue browsing load test scenarios.

Shoppers page through the catalogue, open product pages and look at the
suggestions underneath. Read-only; needs a seeded catalogue
(``python src/manage.py seed``) in a shared database.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import account_headers, listing_params, related_params
from loadtests.helpers.response import envelope_data
from loadtests.helpers.state import BrowsingState

PRODUCT_URL = "/api/v1/internal/product"


class CatalogueBrowsingJourney(SequentialTaskSet):
    """List products -> Open one -> Show related products."""

    def on_start(self):
        self.state = BrowsingState()
        self.headers = account_headers()

    @task
    def list_products(self):
        with self.client.get(
            PRODUCT_URL,
            params=listing_params(),
            headers=self.headers,
            catch_response=True,
            name="GET /product",
        ) as resp:
            data = envelope_data(resp)
            if resp.status_code != 200 or data is None:
                resp.failure(f"List products failed: {resp.status_code}")
                self.interrupt()
                return
            self.state.product_ids = [p["id"] for p in data["products"]]
            if not self.state.product_ids:
                self.interrupt()

    @task
    def open_product(self):
        product_id = random.choice(self.state.product_ids)
        with self.client.get(
            f"{PRODUCT_URL}/{product_id}",
            headers=self.headers,
            catch_response=True,
            name="GET /product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Product detail failed: {resp.status_code}")

    @task
    def related_products(self):
        product_id = random.choice(self.state.product_ids)
        with self.client.get(
            f"{PRODUCT_URL}/{product_id}/related",
            params=related_params(),
            headers=self.headers,
            catch_response=True,
            name="GET /product/{id}/related",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Related products failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class BrowsingUser(HttpUser):
    """Locust user that only browses."""

    wait_time = between(0.5, 2.0)
    tasks = [CatalogueBrowsingJourney]

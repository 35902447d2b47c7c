"""Cart load test scenarios.

A shopper picks a product, opens it to learn its flavors and sizes, then
adds cakes to the cart twice so the second add exercises the line merge.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import account_headers, cart_item_data
from loadtests.helpers.response import envelope_data
from loadtests.helpers.state import CartState
from loadtests.scenarios.browsing import PRODUCT_URL, CatalogueBrowsingJourney

CART_ITEM_URL = "/api/v1/internal/cart/item"


class FillCartJourney(SequentialTaskSet):
    """Pick product -> Read options -> Add item -> Add same item again."""

    def on_start(self):
        self.state = CartState(headers=account_headers())

    @task
    def pick_product(self):
        with self.client.get(
            PRODUCT_URL,
            params={"page_size": 36},
            headers=self.state.headers,
            catch_response=True,
            name="GET /product",
        ) as resp:
            data = envelope_data(resp)
            if resp.status_code != 200 or not data or not data["products"]:
                resp.failure(f"No product to buy: {resp.status_code}")
                self.interrupt()
                return
            self.state.product_id = random.choice(data["products"])["id"]

    @task
    def read_options(self):
        with self.client.get(
            f"{PRODUCT_URL}/{self.state.product_id}",
            headers=self.state.headers,
            catch_response=True,
            name="GET /product/{id}",
        ) as resp:
            data = envelope_data(resp)
            if resp.status_code != 200 or data is None:
                resp.failure(f"Product detail failed: {resp.status_code}")
                self.interrupt()
                return
            self.state.flavor_ids = [f["id"] for f in data["flavors"]]
            self.state.size_ids = [s["id"] for s in data["sizes"]]
            if not self.state.flavor_ids or not self.state.size_ids:
                self.interrupt()

    def _add(self, payload):
        with self.client.post(
            CART_ITEM_URL,
            json=payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart/item",
        ) as resp:
            data = envelope_data(resp)
            if resp.status_code == 200 and data is not None:
                self.state.cart_id = data["cart_id"]
                self.state.line_quantity = data["line_quantity"]
            elif resp.status_code == 400 and "quantityExceedsMaximum" in resp.text:
                # Cap reached on a reused shopper id
                resp.success()
            else:
                resp.failure(f"Add cart item failed: {resp.status_code}")

    @task
    def add_item(self):
        self.payload = cart_item_data(
            self.state.product_id,
            random.choice(self.state.flavor_ids),
            random.choice(self.state.size_ids),
        )
        self._add(self.payload)

    @task
    def add_same_item_again(self):
        self._add(self.payload)

    @task
    def done(self):
        self.interrupt()


class CartUser(HttpUser):
    """Locust user simulating shoppers.

    Weighted distribution:
    - 70% browsing only
    - 30% filling a cart
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        CatalogueBrowsingJourney: 7,
        FillCartJourney: 3,
    }

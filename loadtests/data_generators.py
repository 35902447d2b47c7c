"""Faker-based data generators for Locust load test scenarios.

Each generator produces query strings and payloads that pass the storefront's
validation rules (page sizes, sort keys, availability values, quantity cap,
observation length) and match the API's parameter names.
"""

import random

from faker import Faker

fake = Faker("pt_BR")

PAGE_SIZES = [12, 24, 36]
SORT_KEYS = [
    "relevancia",
    "preco_menor",
    "preco_maior",
    "mais_vendidos",
    "melhor_avaliados",
    "mais_recentes",
]
AVAILABILITY = ["disponivel", "indisponivel", "todos"]
RELATION_CRITERIA = ["categoria", "sabor", "confeiteiro", "popularidade"]
SEARCH_WORDS = ["chocolate", "morango", "limão", "doce de leite", "naked", "truffle", "forest"]


def account_headers(account_id: int = 1, user_id: int | None = None) -> dict:
    """Credential headers; a random shopper id when none is given."""
    return {
        "X-Account-Id": str(account_id),
        "X-User-Id": str(user_id or random.randint(1, 10_000)),
    }


def listing_params() -> dict:
    """Random but valid ``GET /product`` query parameters."""
    params = {
        "page": 1,
        "page_size": random.choice(PAGE_SIZES),
        "sort_by": random.choice(SORT_KEYS),
        "availability": random.choices(AVAILABILITY, weights=[8, 1, 1])[0],
    }
    if random.random() < 0.3:
        params["search_term"] = random.choice(SEARCH_WORDS)
    if random.random() < 0.2:
        low = random.choice([0, 50, 100])
        params["min_price"] = low
        params["max_price"] = low + random.choice([50, 100, 300])
    return params


def related_params() -> dict:
    return {
        "limit": random.randint(1, 8),
        "criteria": random.choice(RELATION_CRITERIA),
    }


def cart_item_data(product_id: str, flavor_id: str, size_id: str) -> dict:
    """Generate an ``AddCartItemRequest`` payload."""
    payload = {
        "product_id": product_id,
        "flavor_id": flavor_id,
        "size_id": size_id,
        "quantity": random.randint(1, 3),
    }
    if random.random() < 0.4:
        payload["observations"] = fake.sentence(nb_words=6)[:200]
    return payload

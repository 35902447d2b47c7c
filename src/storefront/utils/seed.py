"""Demo catalogue for local development and load testing."""

import json

import structlog
from protean.utils.globals import current_domain

from storefront.product.creation import CreateProduct
from storefront.product.pricing import SetPromotionalPrice
from storefront.reference.registration import (
    RegisterCategory,
    RegisterConfectioner,
    RegisterFlavor,
    RegisterSize,
)

logger = structlog.get_logger(__name__)

CATEGORIES = ["Birthday", "Wedding", "Everyday"]
FLAVORS = ["Chocolate", "Strawberry", "Dulce de leche", "Lemon"]
SIZES = [
    ("Small", "15cm, serves 10", 0.0),
    ("Medium", "20cm, serves 20", 25.0),
    ("Large", "25cm, serves 30", 50.0),
]
CONFECTIONERS = [
    ("Ana's Kitchen", 4.8, 1250),
    ("Doce Lar", 4.5, 640),
]
PRODUCTS = [
    # name, category, confectioner, base price, promotional price, flavors
    ("Chocolate Truffle Cake", 0, 0, 120.0, 99.9, [0]),
    ("Strawberry Naked Cake", 1, 0, 180.0, None, [1, 0]),
    ("Dulce de Leche Layer Cake", 0, 1, 95.0, None, [2]),
    ("Lemon Drizzle", 2, 1, 60.0, 49.9, [3]),
    ("Black Forest", 0, 0, 140.0, None, [0, 1]),
    ("Wedding Tier Classic", 1, 1, 450.0, None, [1, 2, 3]),
]


def _process(command):
    return current_domain.process(command, asynchronous=False)


def seed_catalogue(account_id=1):
    """Register reference data and a handful of products for ``account_id``.

    Must run inside the storefront domain context. Returns the product ids.
    """
    category_ids = [_process(RegisterCategory(account_id=account_id, name=name)) for name in CATEGORIES]
    flavor_ids = [_process(RegisterFlavor(account_id=account_id, name=name)) for name in FLAVORS]
    size_ids = [
        _process(RegisterSize(account_id=account_id, name=name, description=description, price_modifier=modifier))
        for name, description, modifier in SIZES
    ]
    confectioner_ids = [
        _process(
            RegisterConfectioner(
                account_id=account_id,
                name=name,
                average_rating=rating,
                total_products_sold=sold,
            )
        )
        for name, rating, sold in CONFECTIONERS
    ]

    product_ids = []
    for name, category, confectioner, base_price, promotional_price, flavors in PRODUCTS:
        product_id = _process(
            CreateProduct(
                account_id=account_id,
                category_id=category_ids[category],
                confectioner_id=confectioner_ids[confectioner],
                name=name,
                description=f"{name}, baked to order.",
                ingredients="Flour, eggs, sugar, butter",
                base_price=base_price,
                main_image=f"https://images.lovecakes.example/{len(product_ids) + 1}.jpg",
                preparation_time="48 hours",
                flavor_ids=json.dumps([flavor_ids[i] for i in flavors]),
                size_ids=json.dumps(size_ids),
            )
        )
        if promotional_price is not None:
            _process(
                SetPromotionalPrice(
                    account_id=account_id,
                    product_id=product_id,
                    promotional_price=promotional_price,
                )
            )
        product_ids.append(product_id)

    logger.info("Demo catalogue seeded", account_id=account_id, products=len(product_ids))
    return product_ids

"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart
from storefront.cart.items import AddCartItem
from storefront.product.pricing import SetPromotionalPrice
from storefront.reference.registration import RegisterSize

ACCOUNT_ID = 1
USER_ID = 7


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def shop():
    """Ids of the product under test and its offered flavor and size."""
    return {}


@pytest.fixture()
def add_cakes(process, shop):
    """Add cakes of the product under test; ``error`` captures a refusal."""

    def _add(quantity, error=None):
        command = AddCartItem(
            account_id=ACCOUNT_ID,
            user_id=USER_ID,
            product_id=shop["product_id"],
            flavor_id=shop["flavor_id"],
            size_id=shop["size_id"],
            quantity=quantity,
        )
        try:
            process(command)
        except ValidationError as exc:
            if error is None:
                raise
            error["exc"] = exc

    return _add


@pytest.fixture()
def shopper_cart():
    return lambda: current_domain.repository_for(Cart).for_user(ACCOUNT_ID, USER_ID)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse(
        "a product priced at {price:f} offered in chocolate with a medium size adding {modifier:f}"
    )
)
def product_on_sale(make_product, catalogue, process, shop, price, modifier):
    size_id = process(RegisterSize(account_id=ACCOUNT_ID, name="Medium", price_modifier=modifier))
    shop["flavor_id"] = catalogue.chocolate
    shop["size_id"] = size_id
    shop["product_id"] = make_product(base_price=price, flavor_ids=[catalogue.chocolate], size_ids=[size_id])


@given(parsers.cfparse("the shopper already has {quantity:d} chocolate medium cakes in the cart"))
def cakes_in_cart(add_cakes, quantity):
    add_cakes(quantity)


@given(parsers.cfparse("the product is on promotion at {price:f}"))
def product_on_promotion(process, shop, price):
    process(SetPromotionalPrice(account_id=ACCOUNT_ID, product_id=shop["product_id"], promotional_price=price))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the request is refused with "{code}"'))
def request_refused(error, code):
    assert error["exc"] is not None
    assert code in next(iter(error["exc"].messages.values()))

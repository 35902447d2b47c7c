"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    __version__ = 1

    cart_id = Identifier(required=True)
    account_id = Integer(required=True)
    user_id = Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A new line was opened in the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    flavor_id = Identifier(required=True)
    size_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_price = Float(required=True)


@storefront.event(part_of="Cart")
class CartItemQuantityIncreased:
    """More of an existing product/flavor/size combination was added."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    added_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    unit_price = Float(required=True)

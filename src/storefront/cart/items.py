"""AddCartItem: put cakes of a given flavor and size in the caller's cart."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.reference.size import Size
from storefront.shared.pricing import line_total
from storefront.shared.rules import MAX_CART_ITEM_QUANTITY, MAX_OBSERVATIONS_LENGTH
from storefront.shared.tenancy import find_in_account

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddCartItem:
    account_id = Integer()
    user_id = Integer()
    product_id = Identifier()
    flavor_id = Identifier()
    size_id = Identifier()
    quantity = Integer()
    observations = String(max_length=MAX_OBSERVATIONS_LENGTH)


def _reject(field, code):
    raise ValidationError({field: [code]})


@storefront.command_handler(part_of=Cart)
class AddCartItemHandler:
    @handle(AddCartItem)
    def add_cart_item(self, command):
        if command.account_id is None:
            _reject("account_id", "accountRequired")
        if command.user_id is None:
            _reject("user_id", "userRequired")
        if command.product_id is None:
            _reject("product_id", "productRequired")
        if command.flavor_id is None:
            _reject("flavor_id", "flavorRequired")
        if command.size_id is None:
            _reject("size_id", "sizeRequired")
        if command.quantity is None or command.quantity < 1:
            _reject("quantity", "quantityRequired")
        if command.quantity > MAX_CART_ITEM_QUANTITY:
            _reject("quantity", "quantityExceedsMaximum")

        product = find_in_account(Product, command.account_id, command.product_id)
        if product is None or not product.is_purchasable:
            _reject("product_id", "productNotAvailable")
        if not product.offers_flavor(command.flavor_id):
            _reject("flavor_id", "flavorNotAvailable")
        if not product.offers_size(command.size_id):
            _reject("size_id", "sizeNotAvailable")
        size = find_in_account(Size, command.account_id, command.size_id)
        if size is None or size.deleted:
            _reject("size_id", "sizeNotAvailable")

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.account_id, command.user_id)
        if cart is None:
            cart = Cart.create(account_id=command.account_id, user_id=command.user_id)

        unit_price = product.unit_price_for(size)
        item = cart.add_item(
            product_id=command.product_id,
            flavor_id=command.flavor_id,
            size_id=command.size_id,
            quantity=command.quantity,
            unit_price=unit_price,
            observations=command.observations,
        )
        repo.add(cart)

        logger.info(
            "Cart item added",
            cart_id=str(cart.id),
            item_id=str(item.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
            line_quantity=item.quantity,
        )

        return {
            "cart_item_id": str(item.id),
            "cart_id": str(cart.id),
            "quantity": command.quantity,
            "unit_price": unit_price,
            "total_price": line_total(unit_price, command.quantity),
            "line_quantity": item.quantity,
            "line_total": item.total_price,
            "success": True,
        }

"""Promotional pricing: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.tenancy import get_in_account


@storefront.command(part_of="Product")
class SetPromotionalPrice:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)
    promotional_price = Float(required=True, min_value=0.01)


@storefront.command(part_of="Product")
class ClearPromotionalPrice:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManagePromotionHandler:
    @handle(SetPromotionalPrice)
    def set_promotional_price(self, command):
        product = get_in_account(Product, command.account_id, command.product_id)
        product.set_promotional_price(command.promotional_price)
        current_domain.repository_for(Product).add(product)

    @handle(ClearPromotionalPrice)
    def clear_promotional_price(self, command):
        product = get_in_account(Product, command.account_id, command.product_id)
        product.clear_promotional_price()
        current_domain.repository_for(Product).add(product)

"""Product availability and lifecycle: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.tenancy import get_in_account


@storefront.command(part_of="Product")
class MarkProductAvailable:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)


@storefront.command(part_of="Product")
class MarkProductUnavailable:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)


@storefront.command(part_of="Product")
class ActivateProduct:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)


@storefront.command(part_of="Product")
class DeactivateProduct:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)


@storefront.command(part_of="Product")
class RemoveProduct:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageLifecycleHandler:
    def _apply(self, command, action):
        product = get_in_account(Product, command.account_id, command.product_id)
        action(product)
        current_domain.repository_for(Product).add(product)

    @handle(MarkProductAvailable)
    def mark_available(self, command):
        self._apply(command, Product.mark_available)

    @handle(MarkProductUnavailable)
    def mark_unavailable(self, command):
        self._apply(command, Product.mark_unavailable)

    @handle(ActivateProduct)
    def activate_product(self, command):
        self._apply(command, Product.activate)

    @handle(DeactivateProduct)
    def deactivate_product(self, command):
        self._apply(command, Product.deactivate)

    @handle(RemoveProduct)
    def remove_product(self, command):
        self._apply(command, Product.remove)

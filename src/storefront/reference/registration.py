"""Reference data registration: commands and handlers.

Categories, flavors, sizes and confectioners are set up by the shop owner
before products can point at them.
"""

from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.reference.category import Category
from storefront.reference.confectioner import Confectioner
from storefront.reference.flavor import Flavor
from storefront.reference.size import Size


@storefront.command(part_of="Category")
class RegisterCategory:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    description = String(max_length=500)


@storefront.command(part_of="Flavor")
class RegisterFlavor:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    description = String(max_length=500)


@storefront.command(part_of="Size")
class RegisterSize:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    description = String(max_length=500)
    price_modifier = Float(default=0.0)


@storefront.command(part_of="Confectioner")
class RegisterConfectioner:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    photo = String(max_length=500)
    average_rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    total_products_sold = Integer(default=0, min_value=0)


@storefront.command_handler(part_of=Category)
class RegisterCategoryHandler:
    @handle(RegisterCategory)
    def register_category(self, command):
        category = Category.register(
            account_id=command.account_id,
            name=command.name,
            description=command.description,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)


@storefront.command_handler(part_of=Flavor)
class RegisterFlavorHandler:
    @handle(RegisterFlavor)
    def register_flavor(self, command):
        flavor = Flavor.register(
            account_id=command.account_id,
            name=command.name,
            description=command.description,
        )
        current_domain.repository_for(Flavor).add(flavor)
        return str(flavor.id)


@storefront.command_handler(part_of=Size)
class RegisterSizeHandler:
    @handle(RegisterSize)
    def register_size(self, command):
        size = Size.register(
            account_id=command.account_id,
            name=command.name,
            description=command.description,
            price_modifier=command.price_modifier,
        )
        current_domain.repository_for(Size).add(size)
        return str(size.id)


@storefront.command_handler(part_of=Confectioner)
class RegisterConfectionerHandler:
    @handle(RegisterConfectioner)
    def register_confectioner(self, command):
        confectioner = Confectioner.register(
            account_id=command.account_id,
            name=command.name,
            photo=command.photo,
            average_rating=command.average_rating,
            total_products_sold=command.total_products_sold,
        )
        current_domain.repository_for(Confectioner).add(confectioner)
        return str(confectioner.id)

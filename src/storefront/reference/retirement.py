"""Reference data retirement: soft deletes for categories, flavors, sizes and confectioners."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.reference.category import Category
from storefront.reference.confectioner import Confectioner
from storefront.reference.flavor import Flavor
from storefront.reference.size import Size
from storefront.shared.tenancy import get_in_account


@storefront.command(part_of="Category")
class RetireCategory:
    account_id = Integer(required=True, min_value=1)
    category_id = Identifier(required=True)


@storefront.command(part_of="Flavor")
class RetireFlavor:
    account_id = Integer(required=True, min_value=1)
    flavor_id = Identifier(required=True)


@storefront.command(part_of="Size")
class RetireSize:
    account_id = Integer(required=True, min_value=1)
    size_id = Identifier(required=True)


@storefront.command(part_of="Confectioner")
class RetireConfectioner:
    account_id = Integer(required=True, min_value=1)
    confectioner_id = Identifier(required=True)


def _retire(aggregate_cls, account_id, identifier):
    record = get_in_account(aggregate_cls, account_id, identifier)
    record.retire()
    current_domain.repository_for(aggregate_cls).add(record)


@storefront.command_handler(part_of=Category)
class RetireCategoryHandler:
    @handle(RetireCategory)
    def retire_category(self, command):
        _retire(Category, command.account_id, command.category_id)


@storefront.command_handler(part_of=Flavor)
class RetireFlavorHandler:
    @handle(RetireFlavor)
    def retire_flavor(self, command):
        _retire(Flavor, command.account_id, command.flavor_id)


@storefront.command_handler(part_of=Size)
class RetireSizeHandler:
    @handle(RetireSize)
    def retire_size(self, command):
        _retire(Size, command.account_id, command.size_id)


@storefront.command_handler(part_of=Confectioner)
class RetireConfectionerHandler:
    @handle(RetireConfectioner)
    def retire_confectioner(self, command):
        _retire(Confectioner, command.account_id, command.confectioner_id)

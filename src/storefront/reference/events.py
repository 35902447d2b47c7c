"""Domain events for the reference data aggregates."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryRegistered:
    __version__ = 1

    category_id = Identifier(required=True)
    account_id = Integer(required=True)
    name = String(required=True)


@storefront.event(part_of="Category")
class CategoryRetired:
    __version__ = 1

    category_id = Identifier(required=True)
    account_id = Integer(required=True)


@storefront.event(part_of="Flavor")
class FlavorRegistered:
    __version__ = 1

    flavor_id = Identifier(required=True)
    account_id = Integer(required=True)
    name = String(required=True)


@storefront.event(part_of="Flavor")
class FlavorRetired:
    __version__ = 1

    flavor_id = Identifier(required=True)
    account_id = Integer(required=True)


@storefront.event(part_of="Size")
class SizeRegistered:
    __version__ = 1

    size_id = Identifier(required=True)
    account_id = Integer(required=True)
    name = String(required=True)
    price_modifier = Float(required=True)


@storefront.event(part_of="Size")
class SizeRetired:
    __version__ = 1

    size_id = Identifier(required=True)
    account_id = Integer(required=True)


@storefront.event(part_of="Confectioner")
class ConfectionerRegistered:
    __version__ = 1

    confectioner_id = Identifier(required=True)
    account_id = Integer(required=True)
    name = String(required=True)


@storefront.event(part_of="Confectioner")
class ConfectionerRetired:
    __version__ = 1

    confectioner_id = Identifier(required=True)
    account_id = Integer(required=True)

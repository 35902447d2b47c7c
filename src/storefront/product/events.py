"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new cake was added to an account's catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    account_id = Integer(required=True)
    category_id = Identifier(required=True)
    confectioner_id = Identifier(required=True)
    name = String(required=True)
    base_price = Float(required=True)
    promotional_price = Float()
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class PromotionalPriceSet:
    """A promotional price now overrides the base price."""

    __version__ = 1

    product_id = Identifier(required=True)
    base_price = Float(required=True)
    promotional_price = Float(required=True)


@storefront.event(part_of="Product")
class PromotionalPriceCleared:
    """The promotion ended; the base price applies again."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_promotional_price = Float(required=True)


@storefront.event(part_of="Product")
class ProductAvailabilityChanged:
    __version__ = 1

    product_id = Identifier(required=True)
    available = Boolean(required=True)


@storefront.event(part_of="Product")
class ProductActivated:
    __version__ = 1

    product_id = Identifier(required=True)


@storefront.event(part_of="Product")
class ProductDeactivated:
    __version__ = 1

    product_id = Identifier(required=True)


@storefront.event(part_of="Product")
class ProductRemoved:
    __version__ = 1

    product_id = Identifier(required=True)
    removed_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductRatingUpdated:
    """Rating statistics were recomputed from the product's reviews."""

    __version__ = 1

    product_id = Identifier(required=True)
    average_rating = Float(required=True)
    total_reviews = Integer(required=True)

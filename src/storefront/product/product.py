"""Product aggregate root with the flavors and sizes it can be ordered in."""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.pricing import effective_price, unit_price


@storefront.entity(part_of="Product")
class ProductFlavor:
    flavor_id = Identifier(required=True)


@storefront.entity(part_of="Product")
class ProductSize:
    size_id = Identifier(required=True)


def _unique(ids):
    seen = []
    for value in ids or []:
        value = str(value)
        if value not in seen:
            seen.append(value)
    return seen


@storefront.aggregate
class Product:
    """A cake on sale in one account's storefront.

    A product is shown to shoppers while it is active and not deleted; it can
    be put in a cart only while it is also available. Ratings are denormalized
    here from the product's reviews.
    """

    account_id = Integer(required=True, min_value=1)
    category_id = Identifier(required=True)
    confectioner_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    description = String(required=True, max_length=1000)
    ingredients = Text(required=True)
    nutritional_info = Text()
    base_price = Float(required=True, min_value=0.01)
    promotional_price = Float(min_value=0.01)
    main_image = String(required=True, max_length=500)
    image_gallery = Text()  # JSON array of image URLs
    average_rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    total_reviews = Integer(default=0, min_value=0)
    preparation_time = String(required=True, max_length=50)
    available = Boolean(default=True)
    active = Boolean(default=True)
    deleted = Boolean(default=False)
    flavors = HasMany(ProductFlavor)
    sizes = HasMany(ProductSize)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def promotional_price_must_undercut_base_price(self):
        if self.promotional_price is not None and self.promotional_price >= self.base_price:
            raise ValidationError({"promotional_price": ["Promotional price must be lower than the base price"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        account_id,
        category_id,
        confectioner_id,
        name,
        description,
        ingredients,
        base_price,
        main_image,
        preparation_time,
        flavor_ids=None,
        size_ids=None,
        promotional_price=None,
        nutritional_info=None,
        image_gallery=None,
        available=True,
    ):
        from storefront.product.events import ProductCreated

        now = datetime.now(UTC)
        gallery_json = json.dumps(image_gallery) if isinstance(image_gallery, list) else image_gallery

        product = cls(
            account_id=account_id,
            category_id=category_id,
            confectioner_id=confectioner_id,
            name=name,
            description=description,
            ingredients=ingredients,
            nutritional_info=nutritional_info,
            base_price=base_price,
            promotional_price=promotional_price,
            main_image=main_image,
            image_gallery=gallery_json,
            preparation_time=preparation_time,
            available=available,
            created_at=now,
            updated_at=now,
        )
        for flavor_id in _unique(flavor_ids):
            product.add_flavors(ProductFlavor(flavor_id=flavor_id))
        for size_id in _unique(size_ids):
            product.add_sizes(ProductSize(size_id=size_id))

        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                account_id=account_id,
                category_id=str(category_id),
                confectioner_id=str(confectioner_id),
                name=name,
                base_price=base_price,
                promotional_price=promotional_price,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def current_price(self):
        return effective_price(self.base_price, self.promotional_price)

    @property
    def has_promotion(self):
        return self.promotional_price is not None

    @property
    def flavor_ids(self):
        return [str(f.flavor_id) for f in self.flavors]

    @property
    def size_ids(self):
        return [str(s.size_id) for s in self.sizes]

    @property
    def is_listed(self):
        return self.active and not self.deleted

    @property
    def is_purchasable(self):
        return self.is_listed and self.available

    def offers_flavor(self, flavor_id):
        return str(flavor_id) in self.flavor_ids

    def offers_size(self, size_id):
        return str(size_id) in self.size_ids

    def shares_flavor_with(self, other):
        return bool(set(self.flavor_ids) & set(other.flavor_ids))

    def unit_price_for(self, size):
        return unit_price(self.base_price, self.promotional_price, size.price_modifier)

    def gallery(self):
        return json.loads(self.image_gallery) if self.image_gallery else []

    # -------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------
    def set_promotional_price(self, promotional_price):
        from storefront.product.events import PromotionalPriceSet

        self._ensure_not_deleted()
        self.promotional_price = promotional_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            PromotionalPriceSet(
                product_id=str(self.id),
                base_price=self.base_price,
                promotional_price=promotional_price,
            )
        )

    def clear_promotional_price(self):
        from storefront.product.events import PromotionalPriceCleared

        self._ensure_not_deleted()
        if self.promotional_price is None:
            raise ValidationError({"promotional_price": ["Product has no promotional price"]})

        previous = self.promotional_price
        self.promotional_price = None
        self.updated_at = datetime.now(UTC)

        self.raise_(
            PromotionalPriceCleared(
                product_id=str(self.id),
                previous_promotional_price=previous,
            )
        )

    # -------------------------------------------------------------------
    # Availability & lifecycle
    # -------------------------------------------------------------------
    def mark_available(self):
        self._change_availability(True)

    def mark_unavailable(self):
        self._change_availability(False)

    def _change_availability(self, available):
        from storefront.product.events import ProductAvailabilityChanged

        self._ensure_not_deleted()
        if self.available == available:
            state = "available" if available else "unavailable"
            raise ValidationError({"available": [f"Product is already {state}"]})

        self.available = available
        self.updated_at = datetime.now(UTC)

        self.raise_(ProductAvailabilityChanged(product_id=str(self.id), available=available))

    def activate(self):
        from storefront.product.events import ProductActivated

        self._ensure_not_deleted()
        if self.active:
            raise ValidationError({"active": ["Product is already active"]})

        self.active = True
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductActivated(product_id=str(self.id)))

    def deactivate(self):
        from storefront.product.events import ProductDeactivated

        self._ensure_not_deleted()
        if not self.active:
            raise ValidationError({"active": ["Product is already inactive"]})

        self.active = False
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductDeactivated(product_id=str(self.id)))

    def remove(self):
        from storefront.product.events import ProductRemoved

        self._ensure_not_deleted()
        now = datetime.now(UTC)
        self.deleted = True
        self.updated_at = now
        self.raise_(ProductRemoved(product_id=str(self.id), removed_at=now))

    # -------------------------------------------------------------------
    # Ratings
    # -------------------------------------------------------------------
    def record_rating(self, average_rating, total_reviews):
        from storefront.product.events import ProductRatingUpdated

        self.average_rating = average_rating
        self.total_reviews = total_reviews
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductRatingUpdated(
                product_id=str(self.id),
                average_rating=average_rating,
                total_reviews=total_reviews,
            )
        )

    def _ensure_not_deleted(self):
        if self.deleted:
            raise ValidationError({"product": ["Product has been removed"]})

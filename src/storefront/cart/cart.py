"""Cart aggregate: one shopping cart per user and account.

Lines are keyed by product, flavor and size. Adding a combination that is
already in the cart merges into the existing line instead of opening a new
one, and no line may hold more than ``MAX_CART_ITEM_QUANTITY`` cakes.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCreated, CartItemAdded, CartItemQuantityIncreased
from storefront.domain import storefront
from storefront.shared.pricing import line_total
from storefront.shared.rules import MAX_CART_ITEM_QUANTITY, MAX_OBSERVATIONS_LENGTH


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    flavor_id = Identifier(required=True)
    size_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_CART_ITEM_QUANTITY)
    unit_price = Float(required=True, min_value=0.0)
    total_price = Float(required=True, min_value=0.0)
    observations = String(max_length=MAX_OBSERVATIONS_LENGTH)
    added_at = DateTime()

    def matches(self, product_id, flavor_id, size_id):
        return (
            str(self.product_id) == str(product_id)
            and str(self.flavor_id) == str(flavor_id)
            and str(self.size_id) == str(size_id)
        )


@storefront.aggregate
class Cart:
    account_id = Integer(required=True, min_value=1)
    user_id = Integer(required=True, min_value=1)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, account_id, user_id):
        now = datetime.now(UTC)
        cart = cls(account_id=account_id, user_id=user_id, created_at=now, updated_at=now)
        cart.raise_(CartCreated(cart_id=str(cart.id), account_id=account_id, user_id=user_id))
        return cart

    def find_item(self, product_id, flavor_id, size_id):
        return next((i for i in self.items if i.matches(product_id, flavor_id, size_id)), None)

    def add_item(self, product_id, flavor_id, size_id, quantity, unit_price, observations=None):
        """Put ``quantity`` cakes in the cart and return the affected line.

        An existing line for the same product, flavor and size absorbs the
        quantity and takes the current unit price; its observations change
        only when new ones are given.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["quantityRequired"]})
        if quantity > MAX_CART_ITEM_QUANTITY:
            raise ValidationError({"quantity": ["quantityExceedsMaximum"]})

        now = datetime.now(UTC)
        existing = self.find_item(product_id, flavor_id, size_id)

        if existing:
            new_quantity = existing.quantity + quantity
            if new_quantity > MAX_CART_ITEM_QUANTITY:
                raise ValidationError({"quantity": ["quantityExceedsMaximum"]})

            existing.quantity = new_quantity
            existing.unit_price = unit_price
            existing.total_price = line_total(unit_price, new_quantity)
            if observations is not None:
                existing.observations = observations
            item = existing

            self.raise_(
                CartItemQuantityIncreased(
                    cart_id=str(self.id),
                    item_id=str(item.id),
                    added_quantity=quantity,
                    new_quantity=new_quantity,
                    unit_price=unit_price,
                )
            )
        else:
            item = CartItem(
                product_id=product_id,
                flavor_id=flavor_id,
                size_id=size_id,
                quantity=quantity,
                unit_price=unit_price,
                total_price=line_total(unit_price, quantity),
                observations=observations,
                added_at=now,
            )
            self.add_items(item)

            self.raise_(
                CartItemAdded(
                    cart_id=str(self.id),
                    item_id=str(item.id),
                    product_id=str(product_id),
                    flavor_id=str(flavor_id),
                    size_id=str(size_id),
                    quantity=quantity,
                    unit_price=unit_price,
                )
            )

        self.updated_at = now
        return item

    @property
    def total(self):
        return round(sum(item.total_price for item in self.items), 2)

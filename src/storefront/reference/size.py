"""Size aggregate: cake sizes and what each one adds to the price."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String

from storefront.domain import storefront
from storefront.reference.events import SizeRegistered, SizeRetired


@storefront.aggregate
class Size:
    """A size option, e.g. "Medium, 20cm, serves 15".

    ``price_modifier`` is added to the product's current price when a cake of
    this size goes into a cart.
    """

    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    description = String(max_length=500, default="")
    price_modifier = Float(default=0.0)
    deleted = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, account_id, name, description=None, price_modifier=0.0):
        now = datetime.now(UTC)
        size = cls(
            account_id=account_id,
            name=name,
            description=description or "",
            price_modifier=price_modifier or 0.0,
            created_at=now,
            updated_at=now,
        )
        size.raise_(
            SizeRegistered(
                size_id=str(size.id),
                account_id=account_id,
                name=name,
                price_modifier=size.price_modifier,
            )
        )
        return size

    def retire(self):
        if self.deleted:
            raise ValidationError({"size": ["Size is already retired"]})

        self.deleted = True
        self.updated_at = datetime.now(UTC)
        self.raise_(SizeRetired(size_id=str(self.id), account_id=self.account_id))

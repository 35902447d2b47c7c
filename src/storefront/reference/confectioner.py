"""Confectioner aggregate: the baker behind a product."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String

from storefront.domain import storefront
from storefront.reference.events import ConfectionerRegistered, ConfectionerRetired


@storefront.aggregate
class Confectioner:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    photo = String(max_length=500)
    average_rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    total_products_sold = Integer(default=0, min_value=0)
    deleted = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, account_id, name, photo=None, average_rating=0.0, total_products_sold=0):
        now = datetime.now(UTC)
        confectioner = cls(
            account_id=account_id,
            name=name,
            photo=photo,
            average_rating=average_rating or 0.0,
            total_products_sold=total_products_sold or 0,
            created_at=now,
            updated_at=now,
        )
        confectioner.raise_(
            ConfectionerRegistered(
                confectioner_id=str(confectioner.id),
                account_id=account_id,
                name=name,
            )
        )
        return confectioner

    def retire(self):
        if self.deleted:
            raise ValidationError({"confectioner": ["Confectioner is already retired"]})

        self.deleted = True
        self.updated_at = datetime.now(UTC)
        self.raise_(ConfectionerRetired(confectioner_id=str(self.id), account_id=self.account_id))

"""Flavor aggregate: a filling/dough combination a product can be baked in."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String

from storefront.domain import storefront
from storefront.reference.events import FlavorRegistered, FlavorRetired


@storefront.aggregate
class Flavor:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    description = String(max_length=500, default="")
    deleted = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, account_id, name, description=None):
        now = datetime.now(UTC)
        flavor = cls(
            account_id=account_id,
            name=name,
            description=description or "",
            created_at=now,
            updated_at=now,
        )
        flavor.raise_(
            FlavorRegistered(
                flavor_id=str(flavor.id),
                account_id=account_id,
                name=name,
            )
        )
        return flavor

    def retire(self):
        if self.deleted:
            raise ValidationError({"flavor": ["Flavor is already retired"]})

        self.deleted = True
        self.updated_at = datetime.now(UTC)
        self.raise_(FlavorRetired(flavor_id=str(self.id), account_id=self.account_id))

"""Category aggregate: groups cakes on the storefront shelf."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String

from storefront.domain import storefront
from storefront.reference.events import CategoryRegistered, CategoryRetired


@storefront.aggregate
class Category:
    account_id = Integer(required=True, min_value=1)
    name = String(required=True, max_length=100)
    description = String(max_length=500, default="")
    deleted = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, account_id, name, description=None):
        now = datetime.now(UTC)
        category = cls(
            account_id=account_id,
            name=name,
            description=description or "",
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryRegistered(
                category_id=str(category.id),
                account_id=account_id,
                name=name,
            )
        )
        return category

    def retire(self):
        if self.deleted:
            raise ValidationError({"category": ["Category is already retired"]})

        self.deleted = True
        self.updated_at = datetime.now(UTC)
        self.raise_(CategoryRetired(category_id=str(self.id), account_id=self.account_id))

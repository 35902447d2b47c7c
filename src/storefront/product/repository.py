"""Repository for the Product aggregate."""

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.rules import CATALOGUE_SCAN_LIMIT


@storefront.repository(part_of=Product)
class ProductRepository:
    """Account-scoped product queries used by the storefront read side."""

    def listed(self, account_id):
        """Products shoppers may see: active and not deleted."""
        return (
            self._dao.query.filter(account_id=account_id, active=True, deleted=False)
            .limit(CATALOGUE_SCAN_LIMIT)
            .all()
            .items
        )

    def purchasable(self, account_id):
        """Listed products that can currently be ordered."""
        return [product for product in self.listed(account_id) if product.available]

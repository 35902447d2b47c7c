"""Repository for the Review aggregate."""

from storefront.domain import storefront
from storefront.review.review import Review
from storefront.shared.rules import CATALOGUE_SCAN_LIMIT


@storefront.repository(part_of=Review)
class ReviewRepository:
    def for_product(self, account_id, product_id):
        """Visible reviews of a product, newest first."""
        reviews = (
            self._dao.query.filter(account_id=account_id, product_id=str(product_id), deleted=False)
            .limit(CATALOGUE_SCAN_LIMIT)
            .all()
            .items
        )
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)

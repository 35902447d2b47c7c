"""Review aggregate: customer ratings that feed a product's score."""

from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String

from storefront.domain import storefront
from storefront.review.events import ReviewRemoved, ReviewSubmitted


@storefront.aggregate
class Review:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)
    customer_name = String(required=True, max_length=100)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = String(max_length=1000, default="")
    deleted = Boolean(default=False)
    created_at = DateTime()

    @classmethod
    def submit(cls, account_id, product_id, customer_name, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            account_id=account_id,
            product_id=product_id,
            customer_name=customer_name,
            rating=rating,
            comment=comment or "",
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                account_id=account_id,
                product_id=str(product_id),
                rating=rating,
                submitted_at=now,
            )
        )
        return review

    def remove(self):
        if self.deleted:
            raise ValidationError({"review": ["Review is already removed"]})

        self.deleted = True
        self.raise_(
            ReviewRemoved(
                review_id=str(self.id),
                account_id=self.account_id,
                product_id=str(self.product_id),
            )
        )


def rating_summary(ratings):
    """Average and count of a product's ratings.

    The average keeps one decimal, with halves rounded away from zero.
    """
    ratings = list(ratings)
    if not ratings:
        return 0.0, 0
    average = (Decimal(sum(ratings)) / Decimal(len(ratings))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(average), len(ratings)

"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id = Identifier(required=True)
    account_id = Integer(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True)
    submitted_at = DateTime(required=True)


@storefront.event(part_of="Review")
class ReviewRemoved:
    __version__ = 1

    review_id = Identifier(required=True)
    account_id = Integer(required=True)
    product_id = Identifier(required=True)

"""Keeps a product's rating statistics in step with its reviews."""

import structlog
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.review.review import Review, rating_summary

logger = structlog.get_logger(__name__)


def refresh_product_rating(product, changed_review):
    """Recompute ``average_rating`` and ``total_reviews`` for ``product``.

    ``changed_review`` is the review touched by the current command; its state
    in memory wins over whatever the repository returns for it, since the unit
    of work has not been committed yet.
    """
    reviews = [
        review
        for review in current_domain.repository_for(Review).for_product(product.account_id, product.id)
        if str(review.id) != str(changed_review.id)
    ]
    if not changed_review.deleted:
        reviews.append(changed_review)

    average_rating, total_reviews = rating_summary(review.rating for review in reviews)
    product.record_rating(average_rating, total_reviews)
    current_domain.repository_for(Product).add(product)

    logger.info(
        "Product rating refreshed",
        product_id=str(product.id),
        average_rating=average_rating,
        total_reviews=total_reviews,
    )

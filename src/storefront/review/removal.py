"""RemoveReview: take a review down and rescore its product."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.review.rating import refresh_product_rating
from storefront.review.review import Review
from storefront.shared.tenancy import find_in_account, get_in_account


@storefront.command(part_of="Review")
class RemoveReview:
    account_id = Integer(required=True, min_value=1)
    review_id = Identifier(required=True)


@storefront.command_handler(part_of=Review)
class RemoveReviewHandler:
    @handle(RemoveReview)
    def remove_review(self, command):
        review = get_in_account(Review, command.account_id, command.review_id)
        review.remove()
        current_domain.repository_for(Review).add(review)

        product = find_in_account(Product, command.account_id, review.product_id)
        if product is not None:
            refresh_product_rating(product, review)

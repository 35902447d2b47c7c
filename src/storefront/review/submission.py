"""SubmitReview: a customer rates a product."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.review.rating import refresh_product_rating
from storefront.review.review import Review
from storefront.shared.tenancy import find_in_account


@storefront.command(part_of="Review")
class SubmitReview:
    account_id = Integer(required=True, min_value=1)
    product_id = Identifier(required=True)
    customer_name = String(required=True, max_length=100)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = String(max_length=1000)


@storefront.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        product = find_in_account(Product, command.account_id, command.product_id)
        if product is None or product.deleted:
            raise ObjectNotFoundError("productDoesntExist")

        review = Review.submit(
            account_id=command.account_id,
            product_id=command.product_id,
            customer_name=command.customer_name,
            rating=command.rating,
            comment=command.comment,
        )
        current_domain.repository_for(Review).add(review)
        refresh_product_rating(product, review)
        return str(review.id)

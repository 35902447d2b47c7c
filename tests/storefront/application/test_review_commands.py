"""Application tests for review submission and removal."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from storefront.product.lifecycle import RemoveProduct
from storefront.product.product import Product
from storefront.review.removal import RemoveReview
from storefront.review.review import Review
from storefront.review.submission import SubmitReview


def _product(product_id):
    return current_domain.repository_for(Product).get(product_id)


def _submit(process, product_id, rating, account_id=1):
    return process(
        SubmitReview(account_id=account_id, product_id=product_id, customer_name="Maria", rating=rating)
    )


class TestSubmitReview:
    def test_review_persists(self, make_product, process):
        product_id = make_product()
        review_id = _submit(process, product_id, 5)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.rating == 5
        assert str(review.product_id) == product_id

    def test_product_rating_is_recomputed(self, make_product, process):
        product_id = make_product()
        _submit(process, product_id, 5)
        _submit(process, product_id, 4)
        _submit(process, product_id, 4)

        product = _product(product_id)
        assert product.total_reviews == 3
        assert product.average_rating == 4.3

    def test_removed_product_cannot_be_reviewed(self, make_product, process):
        product_id = make_product()
        process(RemoveProduct(account_id=1, product_id=product_id))
        with pytest.raises(ObjectNotFoundError):
            _submit(process, product_id, 5)

    def test_other_account_cannot_review(self, make_product, process):
        product_id = make_product()
        with pytest.raises(ObjectNotFoundError):
            _submit(process, product_id, 5, account_id=2)


class TestRemoveReview:
    def test_rating_drops_removed_review(self, make_product, process):
        product_id = make_product()
        _submit(process, product_id, 5)
        low = _submit(process, product_id, 1)

        process(RemoveReview(account_id=1, review_id=low))

        product = _product(product_id)
        assert product.total_reviews == 1
        assert product.average_rating == 5.0

    def test_removing_last_review_resets_rating(self, make_product, process):
        product_id = make_product()
        review_id = _submit(process, product_id, 3)
        process(RemoveReview(account_id=1, review_id=review_id))

        product = _product(product_id)
        assert product.total_reviews == 0
        assert product.average_rating == 0.0

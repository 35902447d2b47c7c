"""Related products: suggestions shown under a product page.

Candidates sharing the chosen criterion with the reference product rank
first; the rest of the slots go to the most popular products.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.reference.confectioner import Confectioner
from storefront.shared.rules import DEFAULT_RELATED_LIMIT, RelationCriteria
from storefront.shared.tenancy import all_in_account, find_in_account, index_by_id


def _matcher(criteria, reference):
    if criteria is RelationCriteria.CATEGORY:
        return lambda p: str(p.category_id) == str(reference.category_id)
    if criteria is RelationCriteria.CONFECTIONER:
        return lambda p: str(p.confectioner_id) == str(reference.confectioner_id)
    if criteria is RelationCriteria.FLAVOR:
        return lambda p: p.shares_flavor_with(reference)
    return lambda p: False


def related_products(account_id, product_id, limit=DEFAULT_RELATED_LIMIT, criteria=RelationCriteria.CATEGORY.value):
    if limit is None or limit < 1:
        raise ValidationError({"limit": ["limitMinimumValue"]})
    try:
        relation = RelationCriteria(criteria)
    except ValueError:
        raise ValidationError({"criteria": ["criteriaInvalidValue"]}) from None

    reference = find_in_account(Product, account_id, product_id)
    if reference is None or reference.deleted:
        raise ObjectNotFoundError("productDoesntExist")

    confectioners = index_by_id(all_in_account(Confectioner, account_id))
    matches = _matcher(relation, reference)

    candidates = [
        p
        for p in current_domain.repository_for(Product).purchasable(account_id)
        if str(p.id) != str(reference.id) and str(p.confectioner_id) in confectioners
    ]
    candidates.sort(
        key=lambda p: (
            0 if matches(p) else 1,
            -(p.total_reviews or 0),
            -(p.average_rating or 0.0),
            str(p.id),
        )
    )

    return [
        {
            "id": str(p.id),
            "name": p.name,
            "main_image": p.main_image,
            "base_price": p.base_price,
            "promotional_price": p.promotional_price,
            "current_price": p.current_price,
            "average_rating": p.average_rating,
            "total_reviews": p.total_reviews,
            "confectioner_name": confectioners[str(p.confectioner_id)].name,
        }
        for p in candidates[:limit]
    ]

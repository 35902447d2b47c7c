"""Product listing: catalogue search with filters, sorting and pagination."""

import math

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.reference.category import Category
from storefront.reference.confectioner import Confectioner
from storefront.shared.rules import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZES,
    Availability,
    SortOrder,
    parse_id_list,
)
from storefront.shared.tenancy import all_in_account, index_by_id


def _invalid(field, code):
    raise ValidationError({field: [code]})


def validate_listing(account_id, page, page_size, sort_by, availability, min_price, max_price):
    """Check listing arguments in the order the storefront reports them.

    Returns the parsed ``(SortOrder, Availability)`` pair.
    """
    if account_id is None or account_id < 1:
        _invalid("account_id", "accountRequired")
    if page is None or page < 1:
        _invalid("page", "pageMinimumValue")
    if page_size not in PAGE_SIZES:
        _invalid("page_size", "pageSizeInvalidValue")
    try:
        sort_order = SortOrder(sort_by)
    except ValueError:
        _invalid("sort_by", "sortByInvalidValue")
    try:
        availability_filter = Availability(availability)
    except ValueError:
        _invalid("availability", "availabilityInvalidValue")
    if min_price is not None and max_price is not None and min_price > max_price:
        _invalid("min_price", "priceRangeInvalid")

    return sort_order, availability_filter


def _matches_availability(product, availability):
    if availability is Availability.AVAILABLE:
        return product.available
    if availability is Availability.UNAVAILABLE:
        return not product.available
    return True


def _matches_search(product, term):
    term = term.lower()
    haystacks = (product.name, product.description, product.ingredients)
    return any(term in (text or "").lower() for text in haystacks)


def _sort_key(sort_order):
    if sort_order is SortOrder.PRICE_ASC:
        return lambda p: (p.current_price, str(p.id))
    if sort_order is SortOrder.PRICE_DESC:
        return lambda p: (-p.current_price, str(p.id))
    if sort_order is SortOrder.BEST_SELLING:
        return lambda p: (-(p.total_reviews or 0), str(p.id))
    if sort_order is SortOrder.TOP_RATED:
        return lambda p: (-(p.average_rating or 0.0), str(p.id))
    if sort_order is SortOrder.NEWEST:
        return lambda p: (-p.created_at.timestamp(), str(p.id))
    return lambda p: str(p.id)


def product_summary(product, category, confectioner):
    return {
        "id": str(product.id),
        "name": product.name,
        "main_image": product.main_image,
        "base_price": product.base_price,
        "promotional_price": product.promotional_price,
        "current_price": product.current_price,
        "has_promotion": product.has_promotion,
        "average_rating": product.average_rating,
        "total_reviews": product.total_reviews,
        "confectioner_name": confectioner.name,
        "available": product.available,
        "preparation_time": product.preparation_time,
        "category_name": category.name,
    }


def list_products(
    account_id,
    page=1,
    page_size=DEFAULT_PAGE_SIZE,
    sort_by=SortOrder.RELEVANCE.value,
    categories=None,
    flavors=None,
    sizes=None,
    confectioners=None,
    min_price=None,
    max_price=None,
    availability=Availability.AVAILABLE.value,
    search_term=None,
):
    """Return one page of the account's catalogue.

    Id filters accept a list or a comma-separated string. Every filter that is
    given must hold for a product to be listed.
    """
    sort_order, availability_filter = validate_listing(
        account_id, page, page_size, sort_by, availability, min_price, max_price
    )

    category_ids = parse_id_list(categories)
    flavor_ids = parse_id_list(flavors)
    size_ids = parse_id_list(sizes)
    confectioner_ids = parse_id_list(confectioners)
    term = search_term or None

    categories_by_id = index_by_id(all_in_account(Category, account_id))
    confectioners_by_id = index_by_id(all_in_account(Confectioner, account_id))

    matches = []
    for product in current_domain.repository_for(Product).listed(account_id):
        category = categories_by_id.get(str(product.category_id))
        confectioner = confectioners_by_id.get(str(product.confectioner_id))
        if category is None or confectioner is None:
            continue
        if not _matches_availability(product, availability_filter):
            continue
        if term and not _matches_search(product, term):
            continue
        if category_ids and str(product.category_id) not in category_ids:
            continue
        if confectioner_ids and str(product.confectioner_id) not in confectioner_ids:
            continue
        if min_price is not None and product.current_price < min_price:
            continue
        if max_price is not None and product.current_price > max_price:
            continue
        if flavor_ids and not any(product.offers_flavor(f) for f in flavor_ids):
            continue
        if size_ids and not any(product.offers_size(s) for s in size_ids):
            continue
        matches.append((product, category, confectioner))

    product_key = _sort_key(sort_order)
    matches.sort(key=lambda row: product_key(row[0]))

    total_items = len(matches)
    offset = (page - 1) * page_size
    page_rows = matches[offset : offset + page_size]

    return {
        "products": [product_summary(*row) for row in page_rows],
        "pagination": {
            "total_items": total_items,
            "total_pages": math.ceil(total_items / page_size),
            "current_page": page,
            "page_size": page_size,
        },
    }

"""Storefront bounded context: LoveCakes catalogue, reviews and shopping cart.

Everything a shopper touches lives here: reference data (categories, flavors,
sizes, confectioners), products with their pricing rules, customer reviews,
and the per-user cart. All aggregates are scoped to an account (tenant).
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

storefront = Domain(name="storefront")

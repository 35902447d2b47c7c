"""FastAPI endpoints for the storefront: catalogue browsing and the cart."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.api.dependencies import Credential, get_credential
from storefront.api.schemas import (
    AddCartItemRequest,
    CartItemAddedData,
    Envelope,
    ProductDetailData,
    ProductListData,
    RelatedProduct,
)
from storefront.cart.items import AddCartItem
from storefront.product.detail import get_product_detail
from storefront.product.listing import list_products
from storefront.product.related import related_products
from storefront.shared.rules import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_RELATED_LIMIT,
    MAX_SEARCH_TERM_LENGTH,
    Availability,
    RelationCriteria,
    SortOrder,
)

API_PREFIX = "/api/v1/internal"

product_router = APIRouter(prefix=f"{API_PREFIX}/product", tags=["product"])
cart_router = APIRouter(prefix=f"{API_PREFIX}/cart", tags=["cart"])
health_router = APIRouter(tags=["health"])


# --- Product endpoints ---


@product_router.get("", response_model=Envelope[ProductListData])
async def list_catalogue(
    credential: Credential = Depends(get_credential),
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    sort_by: str = SortOrder.RELEVANCE.value,
    categories: str | None = None,
    flavors: str | None = None,
    sizes: str | None = None,
    confectioners: str | None = None,
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
    availability: str = Availability.AVAILABLE.value,
    search_term: str | None = Query(default=None, max_length=MAX_SEARCH_TERM_LENGTH),
) -> Envelope[ProductListData]:
    """Browse the catalogue. Id filters are comma-separated."""
    result = list_products(
        account_id=credential.account_id,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        categories=categories,
        flavors=flavors,
        sizes=sizes,
        confectioners=confectioners,
        min_price=min_price,
        max_price=max_price,
        availability=availability,
        search_term=search_term,
    )
    return Envelope[ProductListData](data=result)


@product_router.get("/{product_id}", response_model=Envelope[ProductDetailData])
async def get_product(
    product_id: str,
    credential: Credential = Depends(get_credential),
) -> Envelope[ProductDetailData]:
    result = get_product_detail(credential.account_id, product_id)
    return Envelope[ProductDetailData](data=result)


@product_router.get("/{product_id}/related", response_model=Envelope[list[RelatedProduct]])
async def get_related_products(
    product_id: str,
    credential: Credential = Depends(get_credential),
    limit: int = DEFAULT_RELATED_LIMIT,
    criteria: str = RelationCriteria.CATEGORY.value,
) -> Envelope[list[RelatedProduct]]:
    result = related_products(credential.account_id, product_id, limit=limit, criteria=criteria)
    return Envelope[list[RelatedProduct]](data=result)


# --- Cart endpoints ---


@cart_router.post("/item", response_model=Envelope[CartItemAddedData])
async def add_cart_item(
    body: AddCartItemRequest,
    credential: Credential = Depends(get_credential),
) -> Envelope[CartItemAddedData]:
    command = AddCartItem(
        account_id=credential.account_id,
        user_id=credential.user_id,
        product_id=body.product_id,
        flavor_id=body.flavor_id,
        size_id=body.size_id,
        quantity=body.quantity,
        observations=body.observations,
    )
    result = current_domain.process(command, asynchronous=False)
    return Envelope[CartItemAddedData](data=result)


# --- Health ---


@health_router.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "service": current_domain.name,
        "timestamp": datetime.now(UTC).isoformat(),
    }

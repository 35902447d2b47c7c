"""Pydantic request/response schemas for the storefront API.

These are external contracts (anti-corruption layer), separate from the
internal Protean commands. Every successful response is wrapped in an
``Envelope``.
"""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from storefront.shared.rules import MAX_OBSERVATIONS_LENGTH

T = TypeVar("T")


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------
class Metadata(BaseModel):
    timestamp: str = Field(default_factory=utc_now_iso)


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T
    metadata: Metadata = Field(default_factory=Metadata)


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict | list | None = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: ErrorBody
    timestamp: str = Field(default_factory=utc_now_iso)


# ---------------------------------------------------------------------------
# Product listing
# ---------------------------------------------------------------------------
class ProductSummary(BaseModel):
    id: str
    name: str
    main_image: str
    base_price: float
    promotional_price: float | None = None
    current_price: float
    has_promotion: bool
    average_rating: float
    total_reviews: int
    confectioner_name: str
    available: bool
    preparation_time: str
    category_name: str


class Pagination(BaseModel):
    total_items: int
    total_pages: int
    current_page: int
    page_size: int


class ProductListData(BaseModel):
    products: list[ProductSummary]
    pagination: Pagination


# ---------------------------------------------------------------------------
# Product detail
# ---------------------------------------------------------------------------
class ConfectionerSchema(BaseModel):
    id: str
    name: str
    photo: str | None = None
    average_rating: float
    total_products_sold: int


class ProductSchema(BaseModel):
    id: str
    name: str
    description: str
    ingredients: str
    nutritional_info: str | None = None
    base_price: float
    promotional_price: float | None = None
    current_price: float
    has_promotion: bool
    main_image: str
    image_gallery: list[str] = []
    average_rating: float
    total_reviews: int
    preparation_time: str
    available: bool
    category_id: str
    category_name: str | None = None
    confectioner: ConfectionerSchema


class FlavorSchema(BaseModel):
    id: str
    name: str
    description: str | None = None


class SizeSchema(BaseModel):
    id: str
    name: str
    description: str | None = None
    price_modifier: float


class ReviewSchema(BaseModel):
    id: str
    customer_name: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None


class ProductDetailData(BaseModel):
    product: ProductSchema
    flavors: list[FlavorSchema]
    sizes: list[SizeSchema]
    reviews: list[ReviewSchema]


# ---------------------------------------------------------------------------
# Related products
# ---------------------------------------------------------------------------
class RelatedProduct(BaseModel):
    id: str
    name: str
    main_image: str
    base_price: float
    promotional_price: float | None = None
    current_price: float
    average_rating: float
    total_reviews: int
    confectioner_name: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddCartItemRequest(BaseModel):
    product_id: str
    flavor_id: str
    size_id: str
    quantity: int
    observations: str | None = Field(default=None, max_length=MAX_OBSERVATIONS_LENGTH)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "0f7c1c1e-5b0e-4c1e-9d4e-2b1f6d0a9c11",
                    "flavor_id": "5a2d9f3b-6c4e-4f0a-8b7d-1e9c3a2f4b55",
                    "size_id": "9b8e7d6c-5f4a-4b3c-2d1e-0f9a8b7c6d5e",
                    "quantity": 2,
                    "observations": "Happy birthday, Ana!",
                }
            ]
        }
    }


class CartItemAddedData(BaseModel):
    cart_item_id: str
    cart_id: str
    quantity: int
    unit_price: float
    total_price: float
    line_quantity: int
    line_total: float
    success: bool

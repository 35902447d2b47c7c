"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state; ids discovered while browsing
feed the follow-up requests of the same journey.
"""

from dataclasses import dataclass, field


@dataclass
class BrowsingState:
    """Products seen on the last listing page."""

    product_ids: list[str] = field(default_factory=list)


@dataclass
class CartState:
    """Tracks one shopper filling a cart."""

    headers: dict = field(default_factory=dict)
    product_id: str | None = None
    flavor_ids: list[str] = field(default_factory=list)
    size_ids: list[str] = field(default_factory=list)
    cart_id: str | None = None
    line_quantity: int = 0

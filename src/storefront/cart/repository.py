"""Repository for the Cart aggregate."""

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    def for_user(self, account_id, user_id):
        """The user's cart in this account, or ``None`` before the first add."""
        return self._dao.query.filter(account_id=account_id, user_id=user_id).limit(1).all().first

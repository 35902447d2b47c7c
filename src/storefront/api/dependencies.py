"""Request-scoped dependencies for the storefront API."""

import os

from fastapi import Header
from pydantic import BaseModel


class Credential(BaseModel):
    """Tenant and user a request acts for."""

    account_id: int
    user_id: int


def _default(name: str) -> int:
    return int(os.environ.get(name, "1"))


def get_credential(
    x_account_id: int | None = Header(default=None, ge=1),
    x_user_id: int | None = Header(default=None, ge=1),
) -> Credential:
    """Read the caller's credential from ``X-Account-Id`` / ``X-User-Id``.

    Missing headers fall back to ``STOREFRONT_DEFAULT_ACCOUNT_ID`` and
    ``STOREFRONT_DEFAULT_USER_ID``.
    """
    return Credential(
        account_id=x_account_id if x_account_id is not None else _default("STOREFRONT_DEFAULT_ACCOUNT_ID"),
        user_id=x_user_id if x_user_id is not None else _default("STOREFRONT_DEFAULT_USER_ID"),
    )

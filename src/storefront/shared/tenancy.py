"""Account-scoped lookups.

Every storefront aggregate carries an ``account_id``. Records belonging to
another account are treated exactly like records that do not exist.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.shared.rules import CATALOGUE_SCAN_LIMIT


def find_in_account(aggregate_cls, account_id, identifier):
    """Return the aggregate with ``identifier`` in ``account_id``, or ``None``."""
    if identifier is None:
        return None
    try:
        record = current_domain.repository_for(aggregate_cls).get(str(identifier))
    except ObjectNotFoundError:
        return None
    if record.account_id != account_id:
        return None
    return record


def get_in_account(aggregate_cls, account_id, identifier):
    """Like :func:`find_in_account`, but raise ``ObjectNotFoundError`` when missing."""
    record = find_in_account(aggregate_cls, account_id, identifier)
    if record is None:
        raise ObjectNotFoundError(f"{aggregate_cls.__name__} {identifier} does not exist")
    return record


def all_in_account(aggregate_cls, account_id, include_deleted=False):
    """All records of ``aggregate_cls`` for the account, soft-deleted ones excluded by default."""
    dao = current_domain.repository_for(aggregate_cls)._dao
    criteria = {"account_id": account_id}
    if not include_deleted:
        criteria["deleted"] = False
    return dao.query.filter(**criteria).limit(CATALOGUE_SCAN_LIMIT).all().items


def index_by_id(records):
    return {str(record.id): record for record in records}

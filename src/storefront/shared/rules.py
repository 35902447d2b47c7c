"""Business constants and the wire vocabularies shared by the storefront API.

Wire values for sorting, availability and relation criteria are the ones the
LoveCakes frontend already sends, so they stay in Portuguese.
"""

from enum import Enum

PAGE_SIZES = (12, 24, 36)
DEFAULT_PAGE_SIZE = 12

MAX_CART_ITEM_QUANTITY = 10
MAX_OBSERVATIONS_LENGTH = 200
MAX_SEARCH_TERM_LENGTH = 100

DEFAULT_RELATED_LIMIT = 4

# Upper bound on rows pulled from a repository for one in-memory query
CATALOGUE_SCAN_LIMIT = 10_000


class SortOrder(Enum):
    RELEVANCE = "relevancia"
    PRICE_ASC = "preco_menor"
    PRICE_DESC = "preco_maior"
    BEST_SELLING = "mais_vendidos"
    TOP_RATED = "melhor_avaliados"
    NEWEST = "mais_recentes"


class Availability(Enum):
    AVAILABLE = "disponivel"
    UNAVAILABLE = "indisponivel"
    ALL = "todos"


class RelationCriteria(Enum):
    CATEGORY = "categoria"
    FLAVOR = "sabor"
    CONFECTIONER = "confeiteiro"
    POPULARITY = "popularidade"


def parse_id_list(raw):
    """Split a comma-separated id list, dropping blanks. ``None`` means no filter."""
    if raw is None:
        return None
    if isinstance(raw, list | tuple | set):
        ids = [str(value).strip() for value in raw]
    else:
        ids = [part.strip() for part in str(raw).split(",")]
    ids = [value for value in ids if value]
    return ids or None

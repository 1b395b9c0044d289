"""ORM model registry — import all models so Alembic autogenerate discovers them."""

from address_news.models.address import Address
from address_news.models.search_history import SearchHistory

__all__ = [
    "Address",
    "SearchHistory",
]

"""SearchHistory model — append-only log of address searches."""

import uuid

from sqlalchemy import ForeignKey, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from address_news.models.base import Base, CreatedAtMixin, UUIDMixin


class SearchHistory(Base, UUIDMixin, CreatedAtMixin):
    """A single search request against an address.

    Rows are never updated. Deleting the owning address removes its history
    through ON DELETE CASCADE; the retention purge removes old rows directly.
    """

    __tablename__ = "search_history"

    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    address_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("addresses.id", ondelete="CASCADE"),
        nullable=False,
    )
    search_query: Mapped[str] = mapped_column(Text, nullable=False)
    results_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    search_duration_ms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_search_history_user_created", "user_id", "created_at"),
        Index("ix_search_history_address_id", "address_id"),
        Index("ix_search_history_created_at", "created_at"),
    )

"""Address model — one row per user per case-insensitive address text."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from address_news.models.base import Base, CreatedAtMixin, UUIDMixin, utcnow


class Address(Base, UUIDMixin, CreatedAtMixin):
    """A searched address with parsed components and a running search count.

    ``address_key`` is the lower-cased ``address_text``; the unique
    constraint on ``(user_id, address_key)`` is the upsert conflict target.
    """

    __tablename__ = "addresses"

    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    address_text: Mapped[str] = mapped_column(Text, nullable=False)
    address_key: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    search_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
    last_searched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "address_key", name="uq_addresses_user_address_key"),
        Index("ix_addresses_user_last_searched", "user_id", "last_searched_at"),
        Index("ix_addresses_city_state", "city", "state"),
    )

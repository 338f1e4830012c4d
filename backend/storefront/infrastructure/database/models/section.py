"""SQLAlchemy ORM model for the Section entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.database.base import Base


class SectionModel(Base):
    """ORM model — maps to the 'content_sections' table.

    ``is_active`` is stored as an integer 0/1 column; the repository
    translates it to and from ``bool``.
    """

    __tablename__ = "content_sections"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    page_key: Mapped[str] = mapped_column(String(100), nullable=False)
    kind: Mapped[str] = mapped_column(String(100), nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    authoring_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    layout_variant: Mapped[str] = mapped_column(String(50), nullable=False, default="default")
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    generated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_content_sections_page", "page_key", "is_active", "order_index"),
    )

    def __repr__(self) -> str:
        return (
            f"<SectionModel(id={self.id}, page='{self.page_key}', "
            f"kind='{self.kind}', order={self.order_index})>"
        )

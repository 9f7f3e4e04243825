from sqlalchemy import String, DateTime, ForeignKey, Integer, Boolean, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .family import Family
from .user import User
from ..db.base_class import Base
from . import utcnow


class ShoppingList(Base):
    __tablename__ = "shopping_list"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    family_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("family.id", ondelete="CASCADE"),
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    deadline: Mapped[str | None] = mapped_column(String(255))
    is_done: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    upcoming_items: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    done_items: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    author_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("user.id", ondelete="SET NULL"))
    executor_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("user.id", ondelete="SET NULL"))
    updater_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("user.id", ondelete="SET NULL"))

    created_at: Mapped["DateTime"] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    updated_at: Mapped["DateTime"] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    family: Mapped["Family"] = relationship(back_populates="shopping_lists")
    author: Mapped["User | None"] = relationship(foreign_keys=[author_id], viewonly=True)
    executor: Mapped["User | None"] = relationship(foreign_keys=[executor_id], viewonly=True)
    updater: Mapped["User | None"] = relationship(foreign_keys=[updater_id], viewonly=True)

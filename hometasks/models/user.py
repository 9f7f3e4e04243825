from typing import TYPE_CHECKING, Optional
from sqlalchemy import String, Boolean, DateTime, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .family import Family

class User(Base):
    __tablename__ = "user"
    # a user without a family can never be its head
    __table_args__ = (
        CheckConstraint("NOT is_family_head OR family_id IS NOT NULL", name="ck_user_head_has_family"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)

    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    verification_token: Mapped[Optional[str]] = mapped_column(String(128), unique=True, index=True)
    is_family_head: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    family_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("family.id", ondelete="SET NULL"), index=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    family: Mapped[Optional["Family"]] = relationship(back_populates="users")

    @property
    def has_family(self) -> bool:
        return self.family_id is not None

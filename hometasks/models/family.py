from typing import TYPE_CHECKING
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .user import User
    from .todo import Todo
    from .shopping_list import ShoppingList

class Family(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    users: Mapped[list["User"]] = relationship(back_populates="family", order_by="User.id")
    todos: Mapped[list["Todo"]] = relationship(back_populates="family", cascade="all,delete-orphan", order_by="Todo.id")
    shopping_lists: Mapped[list["ShoppingList"]] = relationship(
        back_populates="family", cascade="all,delete-orphan", order_by="ShoppingList.id"
    )

from pydantic import BaseModel
from datetime import datetime
from .common import ORMModel
from .user import UserShortOut


class ShoppingListItemIn(BaseModel):
    name: str
    is_done: bool = False


class ShoppingListCreate(BaseModel):
    title: str | None = None
    deadline: str | None = None
    items: list[ShoppingListItemIn] | None = None


class ShoppingListOut(ORMModel):
    id: int
    family_id: int
    title: str
    deadline: str | None = None
    is_done: bool
    upcoming_items: list[str] = []
    done_items: list[str] = []
    author: UserShortOut | None = None
    executor: UserShortOut | None = None
    updater: UserShortOut | None = None
    created_at: datetime
    updated_at: datetime

from pydantic import BaseModel
from datetime import datetime
from .common import ORMModel
from .user import UserShortOut
class TodoCreate(BaseModel):
    title: str | None = None
    description: str | None = None
    deadline: str | None = None
class TodoOut(ORMModel):
    id: int
    family_id: int
    title: str
    description: str | None = None
    deadline: str | None = None
    is_done: bool
    author: UserShortOut | None = None
    executor: UserShortOut | None = None
    updater: UserShortOut | None = None
    created_at: datetime
    updated_at: datetime

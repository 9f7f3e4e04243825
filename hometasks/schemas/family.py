from typing import List
from pydantic import BaseModel
from .common import ORMModel
from .user import UserOut
class FamilyCreate(BaseModel):
    name: str | None = None
class FamilyInvite(BaseModel):
    email: str | None = None
class AssignFamilyHeadIn(BaseModel):
    user_to_assign_id: int | None = None
class FamilyOut(ORMModel):
    id: int
    name: str
    users: List[UserOut] = []

from .common import ORMModel


class UserShortOut(ORMModel):
    id: int
    first_name: str
    last_name: str


class UserOut(ORMModel):
    id: int
    email: str
    first_name: str
    last_name: str
    is_verified: bool
    is_family_head: bool
    family_id: int | None = None

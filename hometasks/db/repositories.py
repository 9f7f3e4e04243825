"""
Data-access collaborators used by the orchestrators.

Everything that touches a family's items goes through ``family_id`` so a
caller can never reach another family's rows. Repositories flush but leave
committing to the orchestrator, which owns the unit of work.
"""
from typing import Generic, TypeVar

from sqlalchemy import select, update, delete, func
from sqlalchemy.orm import Session, joinedload

from ..models.family import Family
from ..models.shopping_list import ShoppingList
from ..models.todo import Todo
from ..models.user import User

ItemT = TypeVar("ItemT", Todo, ShoppingList)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def resolve(self, user_id: int) -> User | None:
        return self.db.execute(
            select(User).options(joinedload(User.family)).where(User.id == user_id)
        ).scalar_one_or_none()

    def get_by_email(self, email: str) -> User | None:
        return self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    def get_by_verification_token(self, token: str) -> User | None:
        return self.db.execute(select(User).where(User.verification_token == token)).scalar_one_or_none()

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user


class FamilyRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, *, name: str, head: User) -> Family:
        fam = Family(name=name)
        self.db.add(fam)
        self.db.flush()                 # get fam.id before linking the head
        head.family_id = fam.id
        head.is_family_head = True
        self.db.flush()
        return fam

    def get(self, family_id: int) -> Family | None:
        return self.db.execute(
            select(Family).options(joinedload(Family.users)).where(Family.id == family_id)
        ).unique().scalar_one_or_none()

    def members(self, family_id: int, *, for_update: bool = False) -> list[User]:
        stmt = select(User).where(User.family_id == family_id).order_by(User.id)
        if for_update:
            # reload the locked rows over whatever the session already holds
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return list(self.db.execute(stmt).scalars())

    def add_member(self, family_id: int, user: User) -> User:
        user.family_id = family_id
        user.is_family_head = False
        self.db.flush()
        return user

    def transfer_head(self, family_id: int, target_user_id: int) -> None:
        # one statement: every member's flag becomes (id == target), so no
        # state with zero or two heads is ever visible
        self.db.execute(
            update(User)
            .where(User.family_id == family_id)
            .values(is_family_head=(User.id == target_user_id))
            .execution_options(synchronize_session="fetch")
        )
        self.db.flush()


class FamilyItemRepository(Generic[ItemT]):
    """Family-scoped storage for todos and shopping lists."""

    def __init__(self, db: Session, model: type[ItemT]):
        self.db = db
        self.model = model

    def _with_people(self):
        return (
            joinedload(self.model.author),
            joinedload(self.model.executor),
            joinedload(self.model.updater),
        )

    def save(self, item: ItemT) -> ItemT:
        self.db.add(item)
        self.db.flush()
        self.db.refresh(item)
        return item

    def remove(self, item: ItemT) -> None:
        self.db.delete(item)
        self.db.flush()

    def find_by_id(self, item_id: int, family_id: int) -> ItemT | None:
        return self.db.execute(
            select(self.model)
            .options(*self._with_people())
            .where(self.model.id == item_id, self.model.family_id == family_id)
        ).scalar_one_or_none()

    def find_all_for_family(self, family_id: int) -> list[ItemT]:
        return list(
            self.db.execute(
                select(self.model)
                .options(*self._with_people())
                .where(self.model.family_id == family_id)
                .order_by(self.model.id)
            ).scalars()
        )

    def count_for_family(self, family_id: int) -> int:
        return self.db.execute(
            select(func.count()).select_from(self.model).where(self.model.family_id == family_id)
        ).scalar_one()

    def delete_all_for_family(self, family_id: int) -> int:
        result = self.db.execute(
            delete(self.model)
            .where(self.model.family_id == family_id)
            .execution_options(synchronize_session="fetch")
        )
        self.db.flush()
        return result.rowcount

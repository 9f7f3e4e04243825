import logging
from typing import Any

from sqlalchemy.orm import Session

from ..core.constants import (
    ALLOWED_UPDATE_SHOPPING_LIST_PAYLOAD_KEYS,
    DefaultErrors,
    ResStatus,
    ShoppingListsErrors,
    ShoppingListsSuccesses,
)
from ..db.repositories import FamilyItemRepository
from ..models.shopping_list import ShoppingList
from ..schemas.shopping_list import ShoppingListCreate, ShoppingListOut
from ..validators import PermissionCheck, validate_user_permissions, check_is_proper_update_payload
from .orchestration import ServiceResult, orchestrated, current_user, is_blank

logger = logging.getLogger(__name__)

MEMBER_CHECKS = (PermissionCheck.CHECK_IS_VERIFIED, PermissionCheck.CHECK_HAS_FAMILY)
HEAD_CHECKS = MEMBER_CHECKS + (PermissionCheck.CHECK_IS_FAMILY_HEAD,)


def _shopping_lists(db: Session) -> FamilyItemRepository[ShoppingList]:
    return FamilyItemRepository(db, ShoppingList)


def _dump(shopping_list: ShoppingList) -> dict:
    return ShoppingListOut.model_validate(shopping_list).model_dump(mode="json")


def _not_found() -> ServiceResult:
    return ServiceResult.errors({"shopping_list": DefaultErrors.NOT_FOUND}, ResStatus.NOT_FOUND)


def _allowed(db: Session, credential: str | None, checks):
    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *checks)
    if not permissions.is_valid:
        return None, ServiceResult.from_permission(permissions)
    return user, None


@orchestrated
def create_shopping_list(db: Session, *, credential: str | None, payload: ShoppingListCreate) -> ServiceResult:
    if is_blank(payload.title) or is_blank(payload.items) or any(is_blank(item.name) for item in payload.items):
        return ServiceResult.errors({"payload": DefaultErrors.IS_REQUIRED})

    user, denied = _allowed(db, credential, MEMBER_CHECKS)
    if denied:
        return denied

    shopping_list = ShoppingList(
        family_id=user.family_id,
        title=payload.title,
        upcoming_items=[item.name for item in payload.items if not item.is_done],
        done_items=[item.name for item in payload.items if item.is_done],
        author_id=user.id,
        is_done=False,
    )
    if not is_blank(payload.deadline):
        shopping_list.deadline = payload.deadline

    shopping_list = _shopping_lists(db).save(shopping_list)
    shopping_list_id = shopping_list.id
    db.commit()
    logger.info(f"Shopping list created: id={shopping_list_id}, family_id={user.family_id}, author_id={user.id}")
    return ServiceResult.success({"shopping_lists": ShoppingListsSuccesses.SHOPPING_LIST_CREATED})


@orchestrated
def list_shopping_lists(db: Session, *, credential: str | None) -> ServiceResult:
    user, denied = _allowed(db, credential, MEMBER_CHECKS)
    if denied:
        return denied

    shopping_lists = _shopping_lists(db).find_all_for_family(user.family_id)
    return ServiceResult.success({"shopping_lists": [_dump(s) for s in shopping_lists]})


@orchestrated
def get_shopping_list(db: Session, *, credential: str | None, shopping_list_id: int) -> ServiceResult:
    user, denied = _allowed(db, credential, MEMBER_CHECKS)
    if denied:
        return denied

    shopping_list = _shopping_lists(db).find_by_id(shopping_list_id, user.family_id)
    if not shopping_list:
        return _not_found()
    return ServiceResult.success({"shopping_lists": _dump(shopping_list)})


@orchestrated
def update_shopping_list(
    db: Session, *, credential: str | None, shopping_list_id: int, payload: Any
) -> ServiceResult:
    user, denied = _allowed(db, credential, MEMBER_CHECKS)
    if denied:
        return denied

    if not check_is_proper_update_payload(payload, ALLOWED_UPDATE_SHOPPING_LIST_PAYLOAD_KEYS):
        return ServiceResult.errors({"payload": DefaultErrors.NOT_ALLOWED_VALUE})
    for key in ("upcoming_items", "done_items"):
        if key in payload and not all(isinstance(name, str) and name.strip() for name in payload[key]):
            return ServiceResult.errors({"payload": DefaultErrors.NOT_ALLOWED_VALUE})

    repo = _shopping_lists(db)
    shopping_list = repo.find_by_id(shopping_list_id, user.family_id)
    if not shopping_list:
        return _not_found()

    for key, value in payload.items():
        setattr(shopping_list, key, value)
    shopping_list.updater_id = user.id
    if "is_done" in payload:
        shopping_list.executor_id = user.id if payload["is_done"] else None

    repo.save(shopping_list)
    db.commit()
    logger.info(f"Shopping list updated: id={shopping_list_id}, updater_id={user.id}, keys={sorted(payload)}")
    return ServiceResult.success({"updated_shopping_list": _dump(shopping_list)})


@orchestrated
def delete_shopping_list(db: Session, *, credential: str | None, shopping_list_id: int) -> ServiceResult:
    user, denied = _allowed(db, credential, MEMBER_CHECKS)
    if denied:
        return denied

    repo = _shopping_lists(db)
    shopping_list = repo.find_by_id(shopping_list_id, user.family_id)
    if not shopping_list:
        return _not_found()

    removed = _dump(shopping_list)
    repo.remove(shopping_list)
    db.commit()
    logger.info(f"Shopping list deleted: id={shopping_list_id}, by user_id={user.id}")
    return ServiceResult.success({"shopping_list": removed})


@orchestrated
def delete_all_shopping_lists(db: Session, *, credential: str | None) -> ServiceResult:
    user, denied = _allowed(db, credential, HEAD_CHECKS)
    if denied:
        return denied

    repo = _shopping_lists(db)
    if repo.count_for_family(user.family_id) == 0:
        return ServiceResult.errors({"shopping_lists": ShoppingListsErrors.ALREADY_EMPTY}, ResStatus.CONFLICT)

    deleted = repo.delete_all_for_family(user.family_id)
    db.commit()
    logger.info(f"All shopping lists deleted: family_id={user.family_id}, count={deleted}")
    return ServiceResult.success({"shopping_lists": ShoppingListsSuccesses.SHOPPING_LISTS_DELETED})

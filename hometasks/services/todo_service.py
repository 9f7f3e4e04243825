import logging
from typing import Any

from sqlalchemy.orm import Session

from ..core.constants import (
    ALLOWED_UPDATE_TODO_PAYLOAD_KEYS,
    DefaultErrors,
    ResStatus,
    TodosErrors,
    TodosSuccesses,
)
from ..db.repositories import FamilyItemRepository
from ..models.todo import Todo
from ..schemas.todo import TodoCreate, TodoOut
from ..validators import PermissionCheck, validate_user_permissions, check_is_proper_update_payload
from .orchestration import ServiceResult, orchestrated, current_user, is_blank

logger = logging.getLogger(__name__)

MEMBER_CHECKS = (PermissionCheck.CHECK_IS_VERIFIED, PermissionCheck.CHECK_HAS_FAMILY)
HEAD_CHECKS = MEMBER_CHECKS + (PermissionCheck.CHECK_IS_FAMILY_HEAD,)


def _todos(db: Session) -> FamilyItemRepository[Todo]:
    return FamilyItemRepository(db, Todo)

def _dump(todo: Todo) -> dict:
    return TodoOut.model_validate(todo).model_dump(mode="json")

def _not_found() -> ServiceResult:
    return ServiceResult.errors({"todo": DefaultErrors.NOT_FOUND}, ResStatus.NOT_FOUND)


@orchestrated
def create_todo(db: Session, *, credential: str | None, payload: TodoCreate) -> ServiceResult:
    if is_blank(payload.title):
        return ServiceResult.errors({"title": DefaultErrors.IS_REQUIRED})

    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *MEMBER_CHECKS)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    todo = Todo(family_id=user.family_id, title=payload.title, author_id=user.id, is_done=False)
    if not is_blank(payload.description):
        todo.description = payload.description
    if not is_blank(payload.deadline):
        todo.deadline = payload.deadline

    todo = _todos(db).save(todo)
    todo_id = todo.id
    db.commit()
    logger.info(f"Todo created: id={todo_id}, family_id={user.family_id}, author_id={user.id}")
    return ServiceResult.success({"todos": TodosSuccesses.TODO_CREATED})


@orchestrated
def list_todos(db: Session, *, credential: str | None) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *MEMBER_CHECKS)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    todos = _todos(db).find_all_for_family(user.family_id)
    return ServiceResult.success({"todos": [_dump(t) for t in todos]})


@orchestrated
def get_todo(db: Session, *, credential: str | None, todo_id: int) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *MEMBER_CHECKS)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    todo = _todos(db).find_by_id(todo_id, user.family_id)
    if not todo:
        return _not_found()
    return ServiceResult.success({"todos": _dump(todo)})


@orchestrated
def update_todo(db: Session, *, credential: str | None, todo_id: int, payload: Any) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *MEMBER_CHECKS)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    if not check_is_proper_update_payload(payload, ALLOWED_UPDATE_TODO_PAYLOAD_KEYS):
        return ServiceResult.errors({"payload": DefaultErrors.NOT_ALLOWED_VALUE})

    repo = _todos(db)
    todo = repo.find_by_id(todo_id, user.family_id)
    if not todo:
        return _not_found()

    for key, value in payload.items():
        setattr(todo, key, value)
    todo.updater_id = user.id
    # executor only ever points at whoever marked the todo done
    if "is_done" in payload:
        todo.executor_id = user.id if payload["is_done"] else None

    repo.save(todo)
    db.commit()
    logger.info(f"Todo updated: id={todo_id}, updater_id={user.id}, keys={sorted(payload)}")
    return ServiceResult.success({"updated_todo": _dump(todo)})


@orchestrated
def delete_todo(db: Session, *, credential: str | None, todo_id: int) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *MEMBER_CHECKS)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    repo = _todos(db)
    todo = repo.find_by_id(todo_id, user.family_id)
    if not todo:
        return _not_found()

    removed = _dump(todo)
    repo.remove(todo)
    db.commit()
    logger.info(f"Todo deleted: id={todo_id}, by user_id={user.id}")
    return ServiceResult.success({"todo": removed})


@orchestrated
def delete_all_todos(db: Session, *, credential: str | None) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user, *HEAD_CHECKS)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    repo = _todos(db)
    if repo.count_for_family(user.family_id) == 0:
        return ServiceResult.errors({"todos": TodosErrors.ALREADY_EMPTY}, ResStatus.CONFLICT)

    deleted = repo.delete_all_for_family(user.family_id)
    db.commit()
    logger.info(f"All todos deleted: family_id={user.family_id}, count={deleted}")
    return ServiceResult.success({"todos": TodosSuccesses.TODOS_DELETED})

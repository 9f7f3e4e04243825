from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...schemas.todo import TodoCreate
from ...services import todo_service
from ..deps import get_db, get_credential

router = APIRouter()


# ------------------------------------------------------------------------
# Family-wide todo collection
# ------------------------------------------------------------------------
@router.post("")
def create_todo(
    payload: TodoCreate,
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return todo_service.create_todo(db, credential=credential, payload=payload).to_response()


@router.get("")
def list_todos(
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return todo_service.list_todos(db, credential=credential).to_response()


@router.delete("")
def delete_all_todos(
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    """Family head only; 409 when there is nothing to delete."""
    return todo_service.delete_all_todos(db, credential=credential).to_response()


# ------------------------------------------------------------------------
# Single todo, scoped to the caller's family
# ------------------------------------------------------------------------
@router.get("/{todo_id}")
def get_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return todo_service.get_todo(db, credential=credential, todo_id=todo_id).to_response()


@router.patch("/{todo_id}")
def update_todo(
    todo_id: int,
    payload: Any = Body(default={}),
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return todo_service.update_todo(db, credential=credential, todo_id=todo_id, payload=payload).to_response()


@router.delete("/{todo_id}")
def delete_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return todo_service.delete_todo(db, credential=credential, todo_id=todo_id).to_response()

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...schemas.shopping_list import ShoppingListCreate
from ...services import shopping_list_service
from ..deps import get_db, get_credential

router = APIRouter()


@router.post("")
def create_shopping_list(
    payload: ShoppingListCreate,
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return shopping_list_service.create_shopping_list(db, credential=credential, payload=payload).to_response()


@router.get("")
def list_shopping_lists(
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return shopping_list_service.list_shopping_lists(db, credential=credential).to_response()


@router.delete("")
def delete_all_shopping_lists(
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return shopping_list_service.delete_all_shopping_lists(db, credential=credential).to_response()


@router.get("/{shopping_list_id}")
def get_shopping_list(
    shopping_list_id: int,
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return shopping_list_service.get_shopping_list(
        db, credential=credential, shopping_list_id=shopping_list_id
    ).to_response()


@router.patch("/{shopping_list_id}")
def update_shopping_list(
    shopping_list_id: int,
    payload: Any = Body(default={}),
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return shopping_list_service.update_shopping_list(
        db, credential=credential, shopping_list_id=shopping_list_id, payload=payload
    ).to_response()


@router.delete("/{shopping_list_id}")
def delete_shopping_list(
    shopping_list_id: int,
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return shopping_list_service.delete_shopping_list(
        db, credential=credential, shopping_list_id=shopping_list_id
    ).to_response()

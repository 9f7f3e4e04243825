from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...services import user_service
from ..deps import get_db, get_credential

router = APIRouter()


@router.get("/me")
def me(
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return user_service.get_me(db, credential=credential).to_response()


# Update profile (first name, last name)
@router.patch("/me")
def update_me(
    payload: Any = Body(default={}),
    db: Session = Depends(get_db),
    credential: Optional[str] = Depends(get_credential),
):
    return user_service.update_me(db, credential=credential, payload=payload).to_response()

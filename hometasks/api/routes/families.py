from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...schemas.family import FamilyCreate, FamilyInvite, AssignFamilyHeadIn
from ...services import family_service
from ..deps import get_db, get_credential
router = APIRouter()

@router.post("")
def create(payload: FamilyCreate, db: Session = Depends(get_db), credential: Optional[str] = Depends(get_credential)):
    return family_service.create_family(db, credential=credential, payload=payload).to_response()

@router.get("/me")
def my_family(db: Session = Depends(get_db), credential: Optional[str] = Depends(get_credential)):
    return family_service.get_my_family(db, credential=credential).to_response()

@router.post("/invite")
def invite(payload: FamilyInvite, db: Session = Depends(get_db), credential: Optional[str] = Depends(get_credential)):
    return family_service.invite_member(db, credential=credential, payload=payload).to_response()

@router.post("/head")
def assign_head(payload: AssignFamilyHeadIn, db: Session = Depends(get_db), credential: Optional[str] = Depends(get_credential)):
    return family_service.assign_family_head(db, credential=credential, payload=payload).to_response()

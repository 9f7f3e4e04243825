from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from ...schemas.auth import SignupIn
from ...services import user_service
from ..deps import get_db

router = APIRouter()

@router.post("/signup")
def signup(payload: SignupIn, db: Session = Depends(get_db)):
    return user_service.signup(db, payload=payload).to_response()

@router.post("/confirm/{verification_token}")
def confirm(verification_token: str, db: Session = Depends(get_db)):
    return user_service.confirm(db, verification_token=verification_token).to_response()

@router.post("/token")
def token(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    return user_service.login(db, email=form.username, password=form.password).to_response()

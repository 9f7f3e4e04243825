from typing import Generator, Optional
from fastapi import Header
from sqlalchemy.orm import Session
from ..db.session import SessionLocal
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
def get_credential(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """Pull the raw token out of ``Authorization``; both ``Bearer <token>`` and a bare token work."""
    if not authorization:
        return None
    scheme, _, param = authorization.partition(" ")
    if scheme.lower() == "bearer" and param:
        return param.strip()
    return authorization.strip()

from datetime import datetime, timedelta, timezone
from typing import Any
from passlib.context import CryptContext
import jwt
from ..core.config import settings
from ..core.exceptions import InvalidCredentialError, ExpiredCredentialError
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(p: str) -> str:
    # Ensure bcrypt compatibility (72-byte limit)
    p = p.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.hash(p)



def verify_password(p: str, hashed: str) -> bool:
    p = p.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.verify(p, hashed)

def create_access_token(user: Any, days: int | None = None) -> str:
    """Sign ``{id, email}`` of ``user`` into a credential valid for ``days``."""
    exp_days = days if days is not None else settings.TOKEN_EXPIRE_DAYS
    now = datetime.now(timezone.utc)
    payload = {
        "id": user.id,
        "email": user.email,
        "iat": now,
        "exp": now + timedelta(days=exp_days),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.TOKEN_ALGORITHM)

def decode_access_token(token: str | None) -> dict:
    """
    Verify a credential and return the identity it carries.

    Raises ``ExpiredCredentialError`` past the validity window and
    ``InvalidCredentialError`` for anything else that fails verification.
    Callers only need to catch the common ``CredentialError`` base.
    """
    if not token:
        raise InvalidCredentialError("Missing credential")
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.TOKEN_ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredCredentialError() from e
    except jwt.PyJWTError as e:
        raise InvalidCredentialError() from e

    if "id" not in payload or "email" not in payload:
        raise InvalidCredentialError("Invalid credential payload")
    return {"id": payload["id"], "email": payload["email"]}

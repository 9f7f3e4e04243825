"""
Building blocks shared by every orchestrator.

An orchestrator returns a ``ServiceResult`` for every outcome it expects
(validation, permission, not-found, conflict). Anything it does not expect,
including a credential that fails to decode, propagates to the
``orchestrated`` boundary, which rolls back the session, logs the cause and
turns it into a generic internal-error result.
"""
import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..core.constants import ResStatus, InternalServerErrors
from ..db.repositories import UserRepository
from ..models.user import User
from ..validators.results import PermissionResult
from .security import decode_access_token

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    status: ResStatus
    body: dict[str, Any]
    cause: BaseException | None = field(default=None, repr=False, compare=False)

    @classmethod
    def success(cls, body: dict[str, Any]) -> "ServiceResult":
        return cls(ResStatus.SUCCESS, body)

    @classmethod
    def errors(cls, errors: dict[str, str], status: ResStatus = ResStatus.BAD_REQUEST) -> "ServiceResult":
        return cls(status, {"errors": dict(errors)})

    @classmethod
    def from_permission(cls, result: PermissionResult) -> "ServiceResult":
        return cls.errors(result.errors, result.status)

    @classmethod
    def internal(cls, exc: BaseException) -> "ServiceResult":
        return cls(ResStatus.INTERNAL_ERROR, {"error": InternalServerErrors.STH_WRONG}, cause=exc)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=int(self.status), content=jsonable_encoder(self.body))


def orchestrated(func: Callable[..., ServiceResult]) -> Callable[..., ServiceResult]:
    @wraps(func)
    def wrapper(db: Session, *args, **kwargs) -> ServiceResult:
        try:
            return func(db, *args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__name__} failed: {str(e)}", exc_info=True)
            db.rollback()
            return ServiceResult.internal(e)
    return wrapper


def current_user(db: Session, credential: str | None) -> User | None:
    """Decode ``credential`` and resolve the user it names, with family loaded."""
    identity = decode_access_token(credential)
    return UserRepository(db).resolve(identity["id"])


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False

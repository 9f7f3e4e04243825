import logging
import secrets
from typing import Any

from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from ..core.constants import (
    ALLOWED_UPDATE_USER_PAYLOAD_KEYS,
    PASSWORD_MIN_LENGTH,
    AccountSuccesses,
    DefaultErrors,
    EmailErrors,
    PasswordErrors,
    ResStatus,
    UserErrors,
)
from ..db.repositories import UserRepository
from ..models.user import User
from ..schemas.auth import SignupIn, TokenOut
from ..schemas.user import UserOut
from ..validators import validate_user_permissions, check_is_proper_update_payload
from .orchestration import ServiceResult, orchestrated, current_user, is_blank
from .security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


def validate_email(email: str | None) -> str:
    """Return the error message for ``email`` or an empty string when it is fine."""
    if is_blank(email):
        return EmailErrors.IS_REQUIRED
    try:
        _email_adapter.validate_python(email)
    except ValidationError:
        return EmailErrors.WRONG_FORMAT
    return ""


def validate_password(password: str | None) -> str:
    if is_blank(password):
        return PasswordErrors.IS_REQUIRED
    if len(password) < PASSWORD_MIN_LENGTH:
        return PasswordErrors.WRONG_FORMAT
    return ""


def _profile(user: User) -> dict:
    return UserOut.model_validate(user).model_dump(mode="json")


@orchestrated
def signup(db: Session, *, payload: SignupIn) -> ServiceResult:
    errors: dict[str, str] = {}
    email_error = validate_email(payload.email)
    if email_error:
        errors["email"] = email_error
    password_error = validate_password(payload.password)
    if password_error:
        errors["password"] = password_error
    if is_blank(payload.first_name):
        errors["first_name"] = DefaultErrors.IS_REQUIRED
    if is_blank(payload.last_name):
        errors["last_name"] = DefaultErrors.IS_REQUIRED
    if errors:
        return ServiceResult.errors(errors)

    users = UserRepository(db)
    email = payload.email.strip().lower()
    if users.get_by_email(email):
        logger.warning(f"Signup failed: Email already registered - {email}")
        return ServiceResult.errors({"email": EmailErrors.ALREADY_EXISTS})

    user = User(
        email=email,
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        hashed_password=hash_password(payload.password),
        verification_token=secrets.token_urlsafe(32),
    )
    users.save(user)
    user_id = user.id
    db.commit()
    logger.info(f"User created successfully: id={user_id}, email={email}")
    return ServiceResult.success({"account": AccountSuccesses.CREATED})


@orchestrated
def confirm(db: Session, *, verification_token: str) -> ServiceResult:
    users = UserRepository(db)
    user = users.get_by_verification_token(verification_token)
    if not user:
        return ServiceResult.errors({"token": DefaultErrors.NOT_FOUND}, ResStatus.NOT_FOUND)

    user.is_verified = True
    user.verification_token = None
    users.save(user)
    db.commit()
    logger.info(f"User confirmed: id={user.id}")
    return ServiceResult.success({"account": AccountSuccesses.CONFIRMED})


def authenticate(db: Session, email: str, password: str) -> User | None:
    user = UserRepository(db).get_by_email(email.strip().lower())
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


@orchestrated
def login(db: Session, *, email: str, password: str) -> ServiceResult:
    user = authenticate(db, email, password)
    if not user:
        return ServiceResult.errors({"account": UserErrors.WRONG_CREDENTIALS})
    return ServiceResult.success(TokenOut(access_token=create_access_token(user)).model_dump())


@orchestrated
def get_me(db: Session, *, credential: str | None) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)
    return ServiceResult.success({"user": _profile(user)})


@orchestrated
def update_me(db: Session, *, credential: str | None, payload: Any) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(user)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    if not check_is_proper_update_payload(payload, ALLOWED_UPDATE_USER_PAYLOAD_KEYS):
        return ServiceResult.errors({"payload": DefaultErrors.NOT_ALLOWED_VALUE})

    for key, value in payload.items():
        setattr(user, key, value.strip())
    UserRepository(db).save(user)
    db.commit()
    logger.info(f"User updated: id={user.id}, keys={sorted(payload)}")
    return ServiceResult.success({"user": _profile(user)})

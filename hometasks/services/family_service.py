import logging

from sqlalchemy.orm import Session

from ..core.constants import (
    AccountSuccesses,
    DefaultErrors,
    EmailErrors,
    FamilySuccesses,
    ResStatus,
    UserErrors,
)
from ..db.repositories import FamilyRepository, UserRepository
from ..schemas.family import FamilyCreate, FamilyInvite, AssignFamilyHeadIn, FamilyOut
from ..validators import (
    PermissionCheck,
    validate_user_permissions,
    validate_assigning_user,
    validate_target_user,
)
from .orchestration import ServiceResult, orchestrated, current_user, is_blank

logger = logging.getLogger(__name__)


@orchestrated
def create_family(db: Session, *, credential: str | None, payload: FamilyCreate) -> ServiceResult:
    if is_blank(payload.name):
        return ServiceResult.errors({"name": DefaultErrors.IS_REQUIRED})

    user = current_user(db, credential)
    permissions = validate_user_permissions(user, PermissionCheck.CHECK_IS_VERIFIED)
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)
    if user.has_family:
        return ServiceResult.errors({"user": UserErrors.ALREADY_HAS_FAMILY})

    fam = FamilyRepository(db).create(name=payload.name.strip(), head=user)
    family_id = fam.id
    db.commit()
    logger.info(f"Family created: id={family_id}, head_id={user.id}")
    return ServiceResult.success({"family": FamilySuccesses.CREATED, "family_id": family_id})


@orchestrated
def get_my_family(db: Session, *, credential: str | None) -> ServiceResult:
    user = current_user(db, credential)
    permissions = validate_user_permissions(
        user, PermissionCheck.CHECK_IS_VERIFIED, PermissionCheck.CHECK_HAS_FAMILY
    )
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    fam = FamilyRepository(db).get(user.family_id)
    return ServiceResult.success({"family": FamilyOut.model_validate(fam).model_dump(mode="json")})


@orchestrated
def invite_member(db: Session, *, credential: str | None, payload: FamilyInvite) -> ServiceResult:
    if is_blank(payload.email):
        return ServiceResult.errors({"email": EmailErrors.IS_REQUIRED})

    user = current_user(db, credential)
    permissions = validate_user_permissions(
        user,
        PermissionCheck.CHECK_IS_VERIFIED,
        PermissionCheck.CHECK_HAS_FAMILY,
        PermissionCheck.CHECK_IS_FAMILY_HEAD,
    )
    if not permissions.is_valid:
        return ServiceResult.from_permission(permissions)

    invited = UserRepository(db).get_by_email(payload.email.strip().lower())
    if not invited:
        return ServiceResult.errors({"email": DefaultErrors.NOT_FOUND}, ResStatus.NOT_FOUND)
    if invited.has_family:
        return ServiceResult.errors({"email": UserErrors.ALREADY_HAS_FAMILY}, ResStatus.CONFLICT)

    FamilyRepository(db).add_member(user.family_id, invited)
    invited_id = invited.id
    db.commit()
    logger.info(f"User invited: id={invited_id}, family_id={user.family_id}, by head_id={user.id}")
    return ServiceResult.success({"account": AccountSuccesses.INVITED})


@orchestrated
def assign_family_head(db: Session, *, credential: str | None, payload: AssignFamilyHeadIn) -> ServiceResult:
    """
    Move family headship from the caller to ``payload.user_to_assign_id``.

    Member rows are locked before the target check so two concurrent
    transfers in one family serialize, and the caller is checked again
    against the locked rows. The flip itself is one UPDATE.
    """
    user = current_user(db, credential)
    if user is None:
        return ServiceResult.from_permission(validate_user_permissions(user))

    target_id = payload.user_to_assign_id
    result = validate_assigning_user(user, target_id)
    if not result.is_valid:
        return ServiceResult.from_permission(result)

    families = FamilyRepository(db)
    members = families.members(user.family_id, for_update=True)
    locked_self = next((m for m in members if m.id == user.id), None)
    if locked_self is None:
        return ServiceResult.errors({"email": EmailErrors.HAS_NO_FAMILY})
    result = validate_assigning_user(locked_self, target_id)
    if not result.is_valid:
        return ServiceResult.from_permission(result)
    result = validate_target_user(target_id, members)
    if not result.is_valid:
        return ServiceResult.from_permission(result)

    family_id = user.family_id
    former_head_id = user.id
    families.transfer_head(family_id, target_id)
    db.commit()
    logger.info(f"Family head assigned: family_id={family_id}, from={former_head_id}, to={target_id}")
    return ServiceResult.success({"account": AccountSuccesses.FAMILY_HEAD_ASSIGNED})

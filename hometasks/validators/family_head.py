from typing import Any, Iterable

from ..core.constants import DefaultErrors, EmailErrors, FamilyErrors
from .results import PermissionResult

MIN_FAMILY_SIZE = 2


def validate_assigning_user(assigning_user: Any, target_user_id: int | None) -> PermissionResult:
    """Check that ``assigning_user`` may hand family headship to ``target_user_id``."""
    if target_user_id is None:
        return PermissionResult.fail({"user_to_assign_id": DefaultErrors.IS_REQUIRED})
    if assigning_user.id == target_user_id:
        return PermissionResult.fail({"email": EmailErrors.ASSIGN_ITSELF})
    if not assigning_user.is_family_head:
        return PermissionResult.fail({"email": EmailErrors.IS_NO_FAMILY_HEAD})
    if not assigning_user.has_family:
        return PermissionResult.fail({"email": EmailErrors.HAS_NO_FAMILY})
    return PermissionResult.ok()


def validate_target_user(target_user_id: int | None, family_members: Iterable[Any]) -> PermissionResult:
    """Check that ``target_user_id`` is a member of a family big enough to transfer headship."""
    members = list(family_members)
    if len(members) < MIN_FAMILY_SIZE:
        return PermissionResult.fail({"family": FamilyErrors.TOO_SMALL})
    if not any(m.id == target_user_id for m in members):
        return PermissionResult.fail({"family": FamilyErrors.NO_SUCH_USER})
    return PermissionResult.ok()

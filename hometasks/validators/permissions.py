"""
Permission evaluation for family-scoped operations.

Each check is a named predicate over the resolved user. Checks run in the
order of ``PERMISSION_TABLE`` so the error map for a given input is always
the same. Permission failures are reported with status 400 rather than
401/403; clients depend on that.
"""
from enum import StrEnum
from typing import Any, Callable, NamedTuple

from ..core.constants import ResStatus, UserErrors
from .results import PermissionResult


class PermissionCheck(StrEnum):
    CHECK_IS_VERIFIED = "check_is_verified"
    CHECK_HAS_FAMILY = "check_has_family"
    CHECK_IS_FAMILY_HEAD = "check_is_family_head"


class _Rule(NamedTuple):
    check: PermissionCheck
    predicate: Callable[[Any], bool]
    field: str
    message: str


PERMISSION_TABLE: tuple[_Rule, ...] = (
    _Rule(PermissionCheck.CHECK_IS_VERIFIED, lambda u: u.is_verified is True, "user", UserErrors.HAS_NO_PERMISSIONS),
    _Rule(PermissionCheck.CHECK_HAS_FAMILY, lambda u: u.family_id is not None, "user", UserErrors.HAS_NO_PERMISSIONS),
    _Rule(PermissionCheck.CHECK_IS_FAMILY_HEAD, lambda u: u.is_family_head is True, "user", UserErrors.HAS_NO_PERMISSIONS),
)


def validate_user_permissions(user: Any, *checks: PermissionCheck) -> PermissionResult:
    """Evaluate ``checks`` against ``user``; ``None`` means the user could not be resolved."""
    if user is None:
        return PermissionResult.fail({"user": UserErrors.HAS_NO_PERMISSIONS}, ResStatus.BAD_REQUEST)

    required = set(checks)
    errors: dict[str, str] = {}
    for rule in PERMISSION_TABLE:
        if rule.check in required and not rule.predicate(user):
            errors.setdefault(rule.field, rule.message)

    if errors:
        return PermissionResult.fail(errors, ResStatus.BAD_REQUEST)
    return PermissionResult.ok()

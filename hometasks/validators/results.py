from dataclasses import dataclass, field

from ..core.constants import ResStatus


@dataclass(frozen=True)
class PermissionResult:
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    status: ResStatus = ResStatus.SUCCESS

    @classmethod
    def ok(cls) -> "PermissionResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, errors: dict[str, str], status: ResStatus = ResStatus.BAD_REQUEST) -> "PermissionResult":
        return cls(is_valid=False, errors=dict(errors), status=status)

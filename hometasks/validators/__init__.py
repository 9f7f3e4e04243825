from .results import PermissionResult
from .permissions import PermissionCheck, validate_user_permissions
from .family_head import validate_assigning_user, validate_target_user
from .payload import check_is_proper_update_payload

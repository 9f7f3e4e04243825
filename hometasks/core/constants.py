from enum import IntEnum, StrEnum


class ResStatus(IntEnum):
    SUCCESS = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_ERROR = 500


# --- error messages ---
class DefaultErrors(StrEnum):
    IS_REQUIRED = "is-required"
    NOT_ALLOWED_VALUE = "not-allowed-value"
    NOT_FOUND = "not-found"


class InternalServerErrors(StrEnum):
    STH_WRONG = "something-went-wrong"


class UserErrors(StrEnum):
    HAS_NO_PERMISSIONS = "account-has-no-permissions"
    ALREADY_HAS_FAMILY = "account-already-has-family"
    WRONG_CREDENTIALS = "account-wrong-credentials"


class EmailErrors(StrEnum):
    IS_REQUIRED = "email-is-required"
    WRONG_FORMAT = "email-wrong-format"
    ALREADY_EXISTS = "email-already-exists"
    ASSIGN_ITSELF = "account-assign-itself"
    IS_NO_FAMILY_HEAD = "account-is-no-family-head"
    HAS_NO_FAMILY = "account-has-no-family"


class PasswordErrors(StrEnum):
    IS_REQUIRED = "password-is-required"
    WRONG_FORMAT = "password-wrong-format"


class FamilyErrors(StrEnum):
    NO_SUCH_USER = "family-no-such-user"
    TOO_SMALL = "family-too-small"


class TodosErrors(StrEnum):
    ALREADY_EMPTY = "todos-already-empty"


class ShoppingListsErrors(StrEnum):
    ALREADY_EMPTY = "shopping-lists-already-empty"


# --- success messages ---
class AccountSuccesses(StrEnum):
    CREATED = "account-created"
    CONFIRMED = "account-confirmed"
    INVITED = "account-invited"
    FAMILY_HEAD_ASSIGNED = "account-family-head-assigned"


class FamilySuccesses(StrEnum):
    CREATED = "family-created"


class TodosSuccesses(StrEnum):
    TODO_CREATED = "todos-created"
    TODOS_DELETED = "todos-all-deleted"


class ShoppingListsSuccesses(StrEnum):
    SHOPPING_LIST_CREATED = "shopping-list-created"
    SHOPPING_LISTS_DELETED = "shopping-lists-all-deleted"


# --- update payload whitelists (key -> accepted value type) ---
ALLOWED_UPDATE_TODO_PAYLOAD_KEYS = {
    "title": str,
    "description": str,
    "deadline": str,
    "is_done": bool,
}

ALLOWED_UPDATE_SHOPPING_LIST_PAYLOAD_KEYS = {
    "title": str,
    "deadline": str,
    "is_done": bool,
    "upcoming_items": list,
    "done_items": list,
}

ALLOWED_UPDATE_USER_PAYLOAD_KEYS = {
    "first_name": str,
    "last_name": str,
}

PASSWORD_MIN_LENGTH = 6

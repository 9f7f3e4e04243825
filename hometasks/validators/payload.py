from collections.abc import Collection, Mapping
from typing import Any


def _is_proper_value(value: Any, expected: type | tuple[type, ...] | None) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    if expected is None:
        return True
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    # bool is an int subclass; only accept it where bool is asked for
    if isinstance(value, bool) and bool not in expected_types:
        return False
    return isinstance(value, expected_types)


def check_is_proper_update_payload(payload: Any, allowed_keys: Collection[str]) -> bool:
    """
    Return True when ``payload`` only touches ``allowed_keys`` with usable values.

    ``allowed_keys`` may be a plain collection of names or a mapping of
    name -> expected type(s); with a mapping, value types are checked too.
    An explicit ``None`` or a blank string counts as clearing the field and
    is rejected. Falsy values such as ``False`` or ``0`` are valid.
    """
    if not isinstance(payload, Mapping):
        return False

    for key, value in payload.items():
        if key not in allowed_keys:
            return False
        expected = allowed_keys[key] if isinstance(allowed_keys, Mapping) else None
        if not _is_proper_value(value, expected):
            return False
    return True

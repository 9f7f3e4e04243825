import pytest

from hometasks.core.constants import (
    ALLOWED_UPDATE_TODO_PAYLOAD_KEYS,
    ALLOWED_UPDATE_SHOPPING_LIST_PAYLOAD_KEYS,
    ALLOWED_UPDATE_USER_PAYLOAD_KEYS,
)
from hometasks.validators import check_is_proper_update_payload


class TestCheckIsProperUpdatePayload:
    def test_accepts_allowed_keys(self):
        assert check_is_proper_update_payload({"firstName": "John", "lastName": "Doe"}, ["firstName", "lastName"])

    def test_rejects_unknown_key(self):
        payload = {"firstName": "John", "lastName": "Doe", "notAllowed": "x"}
        assert check_is_proper_update_payload(payload, ["firstName", "lastName"]) is False

    def test_accepts_empty_payload(self):
        assert check_is_proper_update_payload({}, ALLOWED_UPDATE_TODO_PAYLOAD_KEYS) is True

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_rejects_cleared_value(self, value):
        assert check_is_proper_update_payload({"first_name": value}, ALLOWED_UPDATE_USER_PAYLOAD_KEYS) is False

    @pytest.mark.parametrize("key", ["id", "author", "author_id", "family_id", "executor"])
    def test_rejects_over_posting(self, key):
        assert check_is_proper_update_payload({"title": "ok", key: 1}, ALLOWED_UPDATE_TODO_PAYLOAD_KEYS) is False

    def test_false_is_a_valid_value(self):
        assert check_is_proper_update_payload({"is_done": False}, ALLOWED_UPDATE_TODO_PAYLOAD_KEYS) is True

    def test_empty_item_list_is_a_valid_value(self):
        assert check_is_proper_update_payload({"done_items": []}, ALLOWED_UPDATE_SHOPPING_LIST_PAYLOAD_KEYS)

    @pytest.mark.parametrize(
        "payload",
        [
            {"is_done": "yes"},
            {"is_done": 1},
            {"title": 42},
            {"title": ["a"]},
            {"deadline": {"day": 1}},
        ],
    )
    def test_rejects_wrong_shape(self, payload):
        assert check_is_proper_update_payload(payload, ALLOWED_UPDATE_TODO_PAYLOAD_KEYS) is False

    @pytest.mark.parametrize("payload", [None, [], "title", [("title", "x")]])
    def test_rejects_non_mapping_payload(self, payload):
        assert check_is_proper_update_payload(payload, ALLOWED_UPDATE_TODO_PAYLOAD_KEYS) is False

    def test_plain_key_collection_skips_type_checks(self):
        assert check_is_proper_update_payload({"title": 42}, {"title"}) is True

from types import SimpleNamespace

import jwt
import pytest

from hometasks.core.config import settings
from hometasks.core.exceptions import CredentialError, ExpiredCredentialError, InvalidCredentialError
from hometasks.services.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.fixture
def user():
    return SimpleNamespace(id=7, email="john@hometasks.io")


class TestAccessToken:
    def test_round_trip(self, user):
        assert decode_access_token(create_access_token(user)) == {"id": 7, "email": "john@hometasks.io"}

    def test_is_valid_for_two_weeks(self, user):
        claims = jwt.decode(create_access_token(user), settings.SECRET_KEY, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 14 * 24 * 60 * 60

    def test_expired_token(self, user):
        token = create_access_token(user, days=-1)
        with pytest.raises(ExpiredCredentialError):
            decode_access_token(token)

    def test_wrong_signature(self, user):
        claims = jwt.decode(create_access_token(user), settings.SECRET_KEY, algorithms=["HS256"])
        forged = jwt.encode(claims, "another-secret", algorithm="HS256")
        with pytest.raises(InvalidCredentialError):
            decode_access_token(forged)

    def test_tampered_payload(self, user):
        token = create_access_token(user)
        other = create_access_token(SimpleNamespace(id=8, email="jane@hometasks.io"))
        header, _, signature = token.split(".")
        tampered = ".".join([header, other.split(".")[1], signature])
        with pytest.raises(CredentialError):
            decode_access_token(tampered)

    @pytest.mark.parametrize("token", [None, "", "not-a-token"])
    def test_garbage(self, token):
        with pytest.raises(InvalidCredentialError):
            decode_access_token(token)

    def test_both_failures_share_one_base(self):
        assert issubclass(ExpiredCredentialError, CredentialError)
        assert issubclass(InvalidCredentialError, CredentialError)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("secret-pass")
        assert hashed != "secret-pass"
        assert verify_password("secret-pass", hashed)
        assert not verify_password("wrong-pass", hashed)

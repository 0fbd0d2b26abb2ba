import pytest

from login_api.errors import InvalidCredentialsError
from login_api.repositories.user_repo import StaticUserRepo
from login_api.schemas.user import LoginIn, StoredUser
from login_api.services.auth_service import AuthService


@pytest.fixture()
def service():
    return AuthService(StaticUserRepo(StoredUser(username="bob", password="pw", token="tok-bob")))


def test_match_returns_stored_token(service):
    assert service.login(LoginIn(username="bob", password="pw")) == "tok-bob"


def test_mismatch_raises_invalid_credentials(service):
    with pytest.raises(InvalidCredentialsError) as exc_info:
        service.login(LoginIn(username="bob", password="nope"))
    assert exc_info.value.status == 401
    assert exc_info.value.to_dict() == {"message": "Invalid username or password"}


def test_default_repo_uses_configured_account():
    user = StaticUserRepo().get_by_username("user")
    assert user == StoredUser(username="user", password="password123", token="mock-token-123456")
    assert StaticUserRepo().get_by_username("nobody") is None

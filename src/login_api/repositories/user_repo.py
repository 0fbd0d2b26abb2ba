from typing import Protocol

from login_api.core.config import settings
from login_api.schemas.user import StoredUser


class CredentialVerifier(Protocol):
    def get_by_username(self, username: str) -> StoredUser | None: ...


class StaticUserRepo:
    """Holds exactly one account, taken from settings unless given explicitly."""

    def __init__(self, user: StoredUser | None = None):
        self.user = user or StoredUser(
            username=settings.MOCK_USERNAME,
            password=settings.MOCK_PASSWORD,
            token=settings.MOCK_TOKEN,
        )

    def get_by_username(self, username: str) -> StoredUser | None:
        if username == self.user.username:
            return self.user
        return None


def get_user_repo() -> CredentialVerifier:
    return StaticUserRepo()

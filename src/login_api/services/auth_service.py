# src/login_api/services/auth_service.py
from loguru import logger

from login_api.core.security import credentials_match
from login_api.errors import InvalidCredentialsError
from login_api.repositories.user_repo import CredentialVerifier
from login_api.schemas.user import LoginIn

class AuthService:
    def __init__(self, repo: CredentialVerifier):
        self.repo = repo

    def login(self, payload: LoginIn) -> str:
        user = self.repo.get_by_username(payload.username)
        if not user or not credentials_match(user, payload.username, payload.password):
            logger.info("Rejected login for username={!r}", payload.username)
            raise InvalidCredentialsError()
        logger.info("Accepted login for username={!r}", payload.username)
        return user.token

# src/login_api/errors.py
from http import HTTPStatus


class AuthError(Exception):
    status: HTTPStatus = HTTPStatus.BAD_REQUEST
    message: str = "Request failed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class InvalidCredentialsError(AuthError):
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid username or password"

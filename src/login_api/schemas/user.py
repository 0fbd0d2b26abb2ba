from dataclasses import dataclass

from pydantic import BaseModel


@dataclass(frozen=True)
class StoredUser:
    username: str
    password: str
    token: str

class LoginIn(BaseModel):
    username: str
    password: str

class TokenOut(BaseModel):
    token: str

class MessageOut(BaseModel):
    message: str

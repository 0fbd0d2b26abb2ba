from fastapi import APIRouter, Depends
from login_api.repositories.user_repo import CredentialVerifier, get_user_repo
from login_api.schemas.user import LoginIn, MessageOut, TokenOut
from login_api.services.auth_service import AuthService

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=TokenOut, responses={401: {"model": MessageOut}})
def login(payload: LoginIn, repo: CredentialVerifier = Depends(get_user_repo)):
    token = AuthService(repo).login(payload)
    return {"token": token}

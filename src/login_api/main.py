from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from login_api.core.config import settings
from login_api.errors import AuthError
from login_api.routers import auth

app = FastAPI(title=settings.APP_NAME)

@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse(status_code=int(exc.status), content=exc.to_dict())

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

@app.get("/health")
async def health():
    return {"ok": True}

app.include_router(auth.router)

import uvicorn

from login_api.core.config import settings
from login_api.core.logging import setup_logging


def main():
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run("login_api.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()

# src/login_api/core/config.py
import os
from dotenv import load_dotenv

# Load .env from the folder you run uvicorn from
load_dotenv()

class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Mock Login API")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))

    # The one account this backend knows about
    MOCK_USERNAME: str = os.getenv("MOCK_USERNAME", "user")
    MOCK_PASSWORD: str = os.getenv("MOCK_PASSWORD", "password123")
    MOCK_TOKEN: str = os.getenv("MOCK_TOKEN", "mock-token-123456")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()

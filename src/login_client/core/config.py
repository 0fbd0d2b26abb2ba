# src/login_client/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    API_TIMEOUT: float = float(os.getenv("API_TIMEOUT", "30"))

    # Where the session token survives page reloads
    TOKEN_STORE_PATH: str = os.getenv("TOKEN_STORE_PATH", ".login_store/session.json")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()

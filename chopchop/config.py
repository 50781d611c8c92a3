"""
Application settings.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./data/chopchop.db"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # File storage
    DATA_DIR: str = "./data"

    # Generative-language provider (held server-side only)
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT_SECONDS: float = 60.0

    # Relay (same-origin endpoint the pipeline talks to)
    RELAY_URL: str = "http://localhost:5001"
    RELAY_PORT: int = 5001
    RELAY_TIMEOUT_SECONDS: float = 90.0

    # OCR
    OCR_LANG: str = "eng"

    # Recipes
    RECIPE_COUNT: int = 3

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

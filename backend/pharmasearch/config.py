from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # Semantic Scholar
    SEMANTIC_SCHOLAR_ENDPOINT: str = "https://api.semanticscholar.org/graph/v1/paper/search"
    SEMANTIC_SCHOLAR_API_KEY: Optional[str] = None
    PROVIDER_TIMEOUT: float = 30.0
    PROVIDER_CACHE_TTL: int = 300

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # App
    APP_NAME: str = "PharmaSearch"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

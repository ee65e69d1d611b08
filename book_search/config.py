"""
Book Club Search Configuration
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Google Books
    google_books_api_key: str = ""
    google_books_base_url: str = "https://www.googleapis.com/books/v1/volumes"
    google_books_max_results: int = 20
    google_books_timeout: float = 10.0

    # Ranking
    ranking_enabled: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()

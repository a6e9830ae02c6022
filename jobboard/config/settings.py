from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """
    Configuration settings for the query API and the render pipeline.
    """

    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 9090
    LOG_LEVEL: str = "INFO"

    # Files
    DATA_FILE: Path = BASE_DIR / "data.json"
    OUTPUT_PATH: Path = BASE_DIR / "prescription.pdf"

    # Browser settings
    HEADLESS: bool = True  # page.pdf() only works in headless Chromium
    # When set, attach to an already running browser over CDP instead of launching one,
    # e.g. "http://localhost:9222".
    BROWSER_CDP_URL: Optional[str] = None
    IGNORE_HTTPS_ERRORS: bool = True

    # Identity announced before navigation
    USER_AGENT: str = "WebScraper 1.0"
    RANDOM_USER_AGENT: bool = False

    # Readiness gate
    READY_SELECTOR: str = "body"

    # Timeouts
    NAVIGATION_TIMEOUT: int = 30000  # ms
    READY_TIMEOUT: int = 10000  # ms

    # Concurrency
    MAX_CONCURRENT_RENDERS: int = 5


settings = Settings()

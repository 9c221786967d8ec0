import os

from pydantic_settings import BaseSettings

BASE_DIR = os.path.dirname(__file__)
DATA_DIR = os.path.join(BASE_DIR, "data")


class Settings(BaseSettings):
    # Storage
    DB_PATH: str = os.path.join(BASE_DIR, "footly.db")
    CATEGORIES_PATH: str = os.path.join(DATA_DIR, "categories.json")
    FUN_FACTS_PATH: str = os.path.join(DATA_DIR, "fun_facts.json")

    # Game rules
    MAX_INCORRECT: int = 4
    MAX_HINTS: int = 2
    GENERATOR_MAX_ATTEMPTS: int = 1000

    # Sharing
    SHARE_TITLE: str = "Footly Puzzle"
    SHARE_LINK: str = "https://footly-ten.vercel.app/"

    # Server
    APP_NAME: str = "Football Connections API"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        env_prefix = "FOOTLY_"
        extra = "ignore"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if not _settings:
        _settings = Settings()
    return _settings

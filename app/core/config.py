from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # DB
    DATABASE_URL: str = "sqlite:///./database.db"

    # App
    APP_TITLE: str = "E-commerce Ranking Dashboard"
    API_PREFIX: str = "/api"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Query limits
    TOP_RANK_CUTOFF: int = 10
    TOP_RANKINGS_LIMIT: int = 50
    TRENDING_LIMIT: int = 20
    PRICE_HISTORY_LIMIT: int = 30
    SEARCH_DEFAULT_LIMIT: int = 20
    SEARCH_MAX_LIMIT: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()

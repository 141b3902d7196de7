from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://localhost:5432/fitmatch"
    matching_api_key: str | None = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # JSON lines instead of the dev console renderer

    # Ranking (scoring weights and tables are not configurable)
    rank_default_limit: int = 20
    rank_max_limit: int = 100
    rank_max_workers: int | None = None  # None → ThreadPoolExecutor default
    candidate_pool_size: int = 500  # Rows pulled from user_profiles per ranking request
    top_reasons_count: int = 3

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

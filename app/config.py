from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    app_name: str = "Carrier Registry API"
    host: str = "0.0.0.0"
    port: int = 3000
    carriers_path: str = "data/carriers.json"
    responses_path: str = "data/responses.json"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()

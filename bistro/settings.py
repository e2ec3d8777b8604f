from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    menu_csv: Path = Path("data/menu.csv")
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(name)s] %(levelname)-8s %(message)s"
    model_config = SettingsConfigDict(env_file="bistro.env", env_prefix="BISTRO_")


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""
Configuration management for the multiplication table generator
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

from tablegen.models.schemas import TableFormat


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_env: str = "prod"
    log_level: str = "WARNING"

    # Table defaults
    default_format: TableFormat = TableFormat.SIMPLE

    class Config:
        env_prefix = "TABLEGEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_dev(self) -> bool:
        """Whether logs should be rendered for humans"""
        return self.app_env == "dev"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

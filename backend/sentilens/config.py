"""应用配置管理，从环境变量加载配置"""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置类"""

    # LLM API
    llm_api_key: str = ""
    llm_api_base_url: str = ""
    llm_model: str = "gpt-4o-mini"
    llm_timeout: float = 60.0
    llm_temperature: float = 0.2
    llm_max_tokens: int = 4000

    # Database (history key-value store)
    database_url: str = "sqlite:///./sentilens.db"

    # History
    history_key: str = "analysisHistory"
    history_limit: int = 50

    # Document upload
    max_upload_bytes: int = 10 * 1024 * 1024

    # App Config
    debug: bool = False
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = True
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            env_settings,
            dotenv_settings,
            init_settings,
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    """获取配置（仅入口处使用）"""
    return Settings()

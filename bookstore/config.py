"""
运行配置，来源于环境变量（前缀 BOOKSTORE_）或 .env 文件
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """运行配置"""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Bookstore API"
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    seed_sample_data: bool = True


def load_settings(**overrides) -> Settings:
    """读取配置，关键字参数优先于环境变量"""
    return Settings(**overrides)

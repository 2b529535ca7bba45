"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    model_config = SettingsConfigDict(
        env_prefix="TOPOLOGY_",
        env_file=".env",
        case_sensitive=False,
    )

    # Service
    service_name: str = "ecs-topology"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"

    # Cluster defaults
    default_cluster_name: str = "ecs"
    default_region: str = "us-east-1"
    instance_type: str = "t2.micro"

    # Build
    reject_duplicate_app_names: bool = True
    max_workers: int = 1

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()

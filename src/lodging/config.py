import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """環境変数から読み込むアプリケーション設定"""

    hotel_name: str = "Hotel Management System"
    currency_code: str = "INR"
    service_name: str = "lodging"
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """環境変数から Settings を生成する"""
    defaults = Settings()
    return Settings(
        hotel_name=os.getenv("LODGING_HOTEL_NAME", defaults.hotel_name),
        currency_code=os.getenv("LODGING_CURRENCY", defaults.currency_code),
        service_name=os.getenv("POWERTOOLS_SERVICE_NAME", defaults.service_name),
        log_level=os.getenv("POWERTOOLS_LOG_LEVEL", defaults.log_level),
    )

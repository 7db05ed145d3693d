import logging
import sys

from aws_lambda_powertools import Logger

from lodging.config import load_settings


def get_logger(service_name: str | None = None) -> Logger:
    """構造化ロガーを返す（stdout は対話メニューが使うため stderr へ出力）"""
    settings = load_settings()
    return Logger(
        service=service_name or settings.service_name,
        level=settings.log_level,
        logger_handler=logging.StreamHandler(sys.stderr),
    )

"""Конфигурация приложения"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Настройки приложения"""

    # Telegram (нужен только для запуска бота)
    telegram_bot_token: Optional[str] = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Выбор даты из списков
    min_year: int = 1912
    default_year: int = 2000  # Год для подсчета дней, если год не выбран

    # Application
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False
        # Игнорируем неизвестные переменные окружения
        extra = "ignore"


settings = Settings()

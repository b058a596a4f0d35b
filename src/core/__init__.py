"""Core module - Configuration, errors and the settings/persona store."""

from src.core.config import get_settings, Settings, OllamaConfig
from src.core.errors import WriterError, ServiceUnavailable, GatewayError, NotFoundError
from src.core.database import DatabaseService, db_service

__all__ = [
    "get_settings",
    "Settings",
    "OllamaConfig",
    "WriterError",
    "ServiceUnavailable",
    "GatewayError",
    "NotFoundError",
    "DatabaseService",
    "db_service",
]

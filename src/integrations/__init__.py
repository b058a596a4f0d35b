"""Integrations module - External service connectors."""

from src.integrations.ollama import OllamaService

__all__ = [
    "OllamaService",
]

"""Ollama integration for local LLM inference."""

import logging
from typing import Optional, List
import httpx

from src.core.config import OllamaConfig, get_settings
from src.core.errors import ServiceUnavailable, GatewayError
from src.models import GenerationRequest, ModelInfo

logger = logging.getLogger(__name__)


class OllamaService:
    """
    Gateway to an Ollama inference server.

    Holds only its configuration, so one instance can serve
    concurrent requests; every call opens its own HTTP client.
    """

    GENERATE_PATH = "/api/generate"
    TAGS_PATH = "/api/tags"

    def __init__(
        self,
        config: OllamaConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            config: Server URL, default model and timeouts
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.config = config
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "OllamaService":
        """Build a gateway from environment settings."""
        return cls(get_settings().ollama_config())

    @property
    def default_model(self) -> str:
        return self.config.model

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=timeout,
            transport=self._transport
        )

    async def generate(self, request: GenerationRequest) -> str:
        """
        Run a single non-streaming generation.

        Args:
            request: Model, prompt and sampling options

        Returns:
            Generated text, or "" when the server returned none

        Raises:
            ServiceUnavailable: Server refused the connection
            GatewayError: Timeout, non-2xx status or malformed body
        """
        try:
            async with self._client(self.config.timeout) as client:
                response = await client.post(self.GENERATE_PATH, json=request.to_payload())
                response.raise_for_status()
                data = response.json()

        except httpx.ConnectError as e:
            raise ServiceUnavailable() from e
        except httpx.HTTPError as e:
            raise GatewayError(f"Ollama API error: {e}", cause=e) from e
        except ValueError as e:
            raise GatewayError(f"Ollama API error: invalid JSON response ({e})", cause=e) from e

        if not isinstance(data, dict):
            raise GatewayError(f"Ollama API error: unexpected response body {type(data).__name__}")

        text = data.get("response") or data.get("content") or ""
        if not isinstance(text, str):
            raise GatewayError(f"Ollama API error: generated text is {type(text).__name__}, not a string")

        return text

    async def is_available(self) -> bool:
        """Check whether the server answers the catalog endpoint."""
        try:
            async with self._client(self.config.probe_timeout) as client:
                response = await client.get(self.TAGS_PATH)
                return response.is_success
        except Exception as e:
            logger.debug(f"Ollama availability probe failed: {e}")
            return False

    async def list_models(self) -> List[ModelInfo]:
        """Fetch installed models; empty list if the catalog is unreachable."""
        try:
            async with self._client(self.config.timeout) as client:
                response = await client.get(self.TAGS_PATH)
                response.raise_for_status()
                models = response.json().get("models") or []

            return [ModelInfo(**entry) for entry in models]

        except Exception as e:
            logger.error(f"Error getting models: {e}")
            return []

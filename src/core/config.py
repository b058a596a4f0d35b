"""Configuration management for Proposal Writer."""

from functools import lru_cache
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class OllamaConfig(BaseModel):
    """Connection settings handed to the Ollama gateway."""
    base_url: str = Field(default="http://localhost:11434", description="Ollama server URL")
    model: str = Field(default="qwen2.5:14b", description="Default model identifier")
    timeout: float = Field(default=60.0, gt=0, description="Generation timeout in seconds")
    probe_timeout: float = Field(default=5.0, gt=0, description="Health check timeout in seconds")

    class Config:
        frozen = True


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # Ollama Configuration
    # ===========================================
    OLLAMA_URL: str = Field(
        default="http://localhost:11434",
        description="Base URL of the Ollama inference server"
    )
    OLLAMA_MODEL: str = Field(
        default="qwen2.5:14b",
        description="Model used for proposal writing"
    )
    OLLAMA_TIMEOUT: float = Field(default=60.0, description="Generation timeout (seconds)")
    OLLAMA_PROBE_TIMEOUT: float = Field(default=5.0, description="Availability probe timeout (seconds)")

    # ===========================================
    # Supabase Configuration (settings & personas)
    # ===========================================
    SUPABASE_URL: str = Field(default="", description="Supabase project URL")
    SUPABASE_KEY: str = Field(default="", description="Supabase anon key")

    # ===========================================
    # Server Configuration
    # ===========================================
    DEBUG: bool = Field(default=False, description="Debug mode")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def ollama_config(self) -> OllamaConfig:
        """Build the gateway configuration from environment settings."""
        return OllamaConfig(
            base_url=self.OLLAMA_URL.rstrip("/"),
            model=self.OLLAMA_MODEL,
            timeout=self.OLLAMA_TIMEOUT,
            probe_timeout=self.OLLAMA_PROBE_TIMEOUT,
        )

    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_KEY)


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

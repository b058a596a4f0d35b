"""Error taxonomy shared by the gateway, the store and the writing service."""

from typing import Optional


class WriterError(Exception):
    """Base class for proposal writer errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ServiceUnavailable(WriterError):
    """The inference server refused the connection."""

    DEFAULT_MESSAGE = "Ollama service is not running. Please start Ollama and try again."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


class GatewayError(WriterError):
    """Any other transport or protocol failure talking to the inference server."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NotFoundError(WriterError):
    """A keyed record (setting, persona) does not exist."""

    def __init__(self, resource: str, key: str):
        super().__init__(f"{resource} not found: {key}")
        self.resource = resource
        self.key = key

"""Pytest fixtures and configuration for Proposal Writer tests."""

import os
import json
import pytest
from typing import Dict, Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx

# Set test environment variables before importing app
os.environ["OLLAMA_URL"] = "http://ollama.test:11434"
os.environ["OLLAMA_MODEL"] = "qwen2.5:14b"
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_KEY"] = ""
os.environ.setdefault("DEBUG", "false")

from src.core.config import OllamaConfig  # noqa: E402
from src.core.database import DatabaseService  # noqa: E402
from src.integrations.ollama import OllamaService  # noqa: E402
from src.models import Persona  # noqa: E402

TEST_CONFIG = OllamaConfig(base_url="http://ollama.test:11434", model="qwen2.5:14b")


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def sample_analysis_text() -> str:
    """Analysis output in the shape the model usually returns."""
    return """
1. Project Overview
The agency seeks a cloud migration partner.

2. Key Technical Requirements:
- Migrate 40 legacy applications to AWS GovCloud
- Maintain 99.9% availability during cutover
Support for FedRAMP High baselines

3. Compliance Requirements
- Section 508 accessibility
-NIST 800-53 controls

4. Deliverables
- Migration plan within 30 days
- Monthly status reports
"""


@pytest.fixture
def sample_solicitation() -> str:
    """Solicitation text longer than the analysis cap."""
    header = "SOLICITATION W91QUZ-24-R-0001\nCloud Migration Services\n"
    return header + ("Section C. Statement of work. " * 300)


@pytest.fixture
def sample_proposal_data() -> Dict[str, Any]:
    """Proposal data as sent by the front end (camelCase keys)."""
    return {
        "projectName": "Enterprise Cloud Migration",
        "agency": "Department of Veterans Affairs",
        "requirements": "Migrate legacy workloads to FedRAMP High cloud",
        "technicalApproach": "Phased lift-and-shift followed by re-platforming",
    }


@pytest.fixture
def sample_persona_row() -> Dict[str, Any]:
    """Persona row as returned by Supabase."""
    return {
        "id": 7,
        "name": "federal-it-expert",
        "display_name": "Federal IT Expert",
        "description": "Twenty years of federal IT proposals",
        "system_prompt": "You are a federal IT capture manager with 20 years of experience.",
        "specialty": "Cloud and cybersecurity",
        "writing_style": "Professional",
        "is_active": True,
        "is_default": True,
        "created_at": "2024-01-15T10:00:00+00:00",
    }


@pytest.fixture
def sample_models_payload() -> Dict[str, Any]:
    """Ollama /api/tags response."""
    return {
        "models": [
            {
                "name": "qwen2.5:14b",
                "model": "qwen2.5:14b",
                "modified_at": "2024-05-01T12:00:00Z",
                "size": 8988124069,
                "digest": "7cdf5a0187d5",
                "details": {"family": "qwen2", "parameter_size": "14.8B"},
            },
            {
                "name": "gemma2:9b",
                "model": "gemma2:9b",
                "size": 5443152417,
                "details": {"family": "gemma2"},
            },
        ]
    }


# ===========================================
# Mock Fixtures
# ===========================================

@pytest.fixture
def make_gateway() -> Callable[[Callable[[httpx.Request], httpx.Response]], OllamaService]:
    """Build an OllamaService whose HTTP calls go to a handler function."""
    def _make(handler):
        return OllamaService(TEST_CONFIG, transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def refused_gateway(make_gateway) -> OllamaService:
    """Gateway whose server refuses every connection."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
    return make_gateway(handler)


@pytest.fixture
def recording_gateway(make_gateway):
    """Gateway that records request bodies and echoes the prompt length."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        calls.append(body)
        return httpx.Response(200, json={
            "model": body["model"],
            "response": f"Generated from {len(body['prompt'])} prompt characters",
            "done": True,
        })

    gateway = make_gateway(handler)
    gateway.calls = calls
    return gateway


@pytest.fixture
def stub_gateway() -> MagicMock:
    """Gateway mock returning canned text."""
    gateway = MagicMock(spec=OllamaService)
    gateway.default_model = "qwen2.5:14b"
    gateway.generate = AsyncMock(return_value="Our approach delivers measurable results.")
    gateway.is_available = AsyncMock(return_value=True)
    gateway.list_models = AsyncMock(return_value=[])
    return gateway


@pytest.fixture
def mock_supabase() -> MagicMock:
    """Mock Supabase client; set .data on the execute() result per test."""
    return MagicMock()


@pytest.fixture
def database(mock_supabase) -> DatabaseService:
    """DatabaseService wired to the mock Supabase client."""
    service = DatabaseService()
    service._client = mock_supabase
    return service


@pytest.fixture
def persona_store(sample_persona_row) -> MagicMock:
    """Persona store mock returning the sample persona."""
    store = MagicMock(spec=DatabaseService)
    persona = Persona(**sample_persona_row)
    store.get_persona = AsyncMock(return_value=persona)
    store.get_default_persona = AsyncMock(return_value=persona)
    return store


# ===========================================
# Pytest Configuration
# ===========================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that need a running Ollama server"
    )

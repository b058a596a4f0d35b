"""
Proposal Writer - Command line entry point.

Generates government proposal content with a local Ollama model:
- Section generation with role or persona system prompts
- Solicitation analysis with requirement extraction
- Content improvement and executive summaries

Run with:
    python -m src.main section "Describe our cloud migration approach" --type technical-approach
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import BaseModel

from src.core.config import get_settings
from src.core.database import db_service
from src.core.errors import ServiceUnavailable, GatewayError, NotFoundError
from src.integrations.ollama import OllamaService
from src.services.writing_service import WritingService

# sysexits.h EX_TEMPFAIL: caller may retry once Ollama is up
EXIT_UNAVAILABLE = 75

logger = logging.getLogger(__name__)

app = typer.Typer(help="Proposal Writer - AI proposal content from a local Ollama model")


# ===========================================
# Logging Configuration
# ===========================================

def setup_logging():
    """Configure application logging."""
    settings = get_settings()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    # stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


# ===========================================
# Service Wiring
# ===========================================

def build_writing_service() -> WritingService:
    """Wire the writing service from environment settings."""
    settings = get_settings()

    gateway = OllamaService(settings.ollama_config())
    personas = db_service if settings.supabase_configured else None

    if personas is None:
        logger.debug("Supabase not configured - personas disabled")

    return WritingService(gateway=gateway, personas=personas)


def _emit(result) -> None:
    """Print a result record (or plain value) as JSON."""
    if isinstance(result, BaseModel):
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(json.dumps(result, indent=2, default=str))


def _run(coro):
    """Run an operation, mapping gateway failures to exit codes."""
    try:
        return asyncio.run(coro)
    except ServiceUnavailable as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_UNAVAILABLE)
    except (GatewayError, NotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _read_text(value: str) -> str:
    """Treat '@path' as a file to read, anything else as literal text."""
    if value.startswith("@"):
        return Path(value[1:]).read_text(encoding="utf-8")
    return value


# ===========================================
# Commands
# ===========================================

@app.callback()
def main():
    """Configure logging before any command runs."""
    setup_logging()


@app.command()
def health():
    """Check whether the Ollama server is reachable."""
    service = build_writing_service()
    available = _run(service.is_available())
    _emit({
        "available": available,
        "service": "Ollama",
        "url": service.gateway.config.base_url,
    })
    if not available:
        raise typer.Exit(code=EXIT_UNAVAILABLE)


@app.command()
def models():
    """List models installed on the Ollama server."""
    service = build_writing_service()
    installed = _run(service.list_models())
    _emit({
        "models": [m.model_dump() for m in installed],
        "current_model": service.gateway.default_model,
    })


@app.command()
def section(
    prompt: str = typer.Argument(..., help="Section instructions, or @file"),
    section_type: Optional[str] = typer.Option(None, "--type", help="Section category"),
    length: Optional[str] = typer.Option(None, help="Target length in words, e.g. 500 or 500-800"),
    budget: Optional[str] = typer.Option(None, help="Budget considerations"),
    timeline: Optional[str] = typer.Option(None, help="Timeline note"),
    evaluation_criteria: Optional[str] = typer.Option(None, help="Evaluation criteria, or @file"),
    past_performance: Optional[str] = typer.Option(None, help="Past performance, or @file"),
    persona: Optional[str] = typer.Option(None, help="Persona ID"),
):
    """Generate a proposal section."""
    hints = {
        "length": length,
        "budget": budget,
        "timeline": timeline,
        "evaluation_criteria": _read_text(evaluation_criteria) if evaluation_criteria else None,
        "past_performance": _read_text(past_performance) if past_performance else None,
    }
    service = build_writing_service()
    _emit(_run(service.generate_section(_read_text(prompt), section_type, hints, persona)))


@app.command()
def analyze(document: str = typer.Argument(..., help="Solicitation text, or @file")):
    """Analyze a solicitation document."""
    service = build_writing_service()
    _emit(_run(service.analyze_solicitation(_read_text(document))))


@app.command()
def improve(
    content: str = typer.Argument(..., help="Content to improve, or @file"),
    improvement_type: str = typer.Option("general", "--type", help="clarity, technical, persuasive, compliance, general"),
):
    """Improve existing proposal content."""
    service = build_writing_service()
    _emit(_run(service.improve_content(_read_text(content), improvement_type)))


@app.command()
def summary(proposal_file: Path = typer.Argument(..., help="JSON file with proposal data")):
    """Generate an executive summary from proposal data."""
    proposal = json.loads(proposal_file.read_text(encoding="utf-8"))
    service = build_writing_service()
    _emit(_run(service.generate_executive_summary(proposal)))


# ===========================================
# Main Entry Point
# ===========================================

if __name__ == "__main__":
    app()

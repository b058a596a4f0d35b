"""Writing Service - Orchestrates prompt composition and Ollama generation."""

import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional, Union, List

from src.core.config import get_settings
from src.core.database import DatabaseService, db_service
from src.integrations.ollama import OllamaService
from src.intelligence.prompts import (
    get_system_prompt,
    build_generation_prompt,
    build_analysis_prompt,
    build_improvement_prompt,
    build_executive_summary_prompt,
)
from src.intelligence.requirements_parser import parse_requirements
from src.models import (
    SamplingOptions,
    GenerationRequest,
    RequirementHints,
    GenerationResult,
    ModelInfo,
    SolicitationAnalysis,
    ProposalSnapshot,
    ContentImprovementResult,
    ExecutiveSummaryResult,
    ImprovementType,
)

logger = logging.getLogger(__name__)


# Fixed per operation; callers cannot tune sampling.
SECTION_SAMPLING = SamplingOptions(temperature=0.7, top_p=0.9, max_tokens=2000)
ANALYSIS_SAMPLING = SamplingOptions(temperature=0.3, max_tokens=1500)
IMPROVEMENT_SAMPLING = SamplingOptions(temperature=0.5, max_tokens=2000)
SUMMARY_SAMPLING = SamplingOptions(temperature=0.6, max_tokens=1200)


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens; 0 for blank text."""
    return len(text.split())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WritingService:
    """
    Proposal writing operations backed by a local Ollama model.

    Each operation composes one prompt, makes exactly one gateway
    call and wraps the text in an immutable result record. Gateway
    errors are logged and re-raised unchanged.
    """

    def __init__(
        self,
        gateway: Optional[OllamaService] = None,
        personas: Optional[DatabaseService] = None
    ):
        """
        Args:
            gateway: Ollama gateway (built from settings if omitted)
            personas: Persona store; defaults to Supabase when configured
        """
        self._gateway = gateway
        self._personas = personas

    @property
    def gateway(self) -> OllamaService:
        """Lazy load the Ollama gateway."""
        if self._gateway is None:
            self._gateway = OllamaService.from_settings()
        return self._gateway

    @property
    def personas(self) -> Optional[DatabaseService]:
        """Persona store, or None when Supabase is not configured."""
        if self._personas is None and get_settings().supabase_configured:
            self._personas = db_service
        return self._personas

    def _request(self, prompt: str, options: SamplingOptions) -> GenerationRequest:
        return GenerationRequest(
            model=self.gateway.default_model,
            prompt=prompt,
            stream=False,
            options=options
        )

    async def _resolve_system_prompt(
        self,
        section_type: Optional[str],
        persona_id: Optional[Any]
    ) -> str:
        """Persona prompt when one applies, otherwise the role template."""
        store = self.personas
        if store is not None:
            persona = None
            if persona_id is not None:
                persona = await store.get_persona(persona_id)
            elif section_type is None:
                try:
                    persona = await store.get_default_persona()
                except Exception as e:
                    logger.error(f"Default persona lookup failed, using role prompt: {e}")

            if persona and persona.system_prompt:
                logger.info(f"Using persona '{persona.name}' system prompt")
                return persona.system_prompt

        return get_system_prompt(section_type)

    # ===========================================
    # Public Operations
    # ===========================================

    async def generate_section(
        self,
        prompt: str,
        section_type: Optional[str] = None,
        hints: Union[RequirementHints, Dict[str, Any], None] = None,
        persona_id: Optional[Any] = None
    ) -> GenerationResult:
        """
        Generate a proposal section.

        Args:
            prompt: Writer's instructions for the section
            section_type: Section category (technical-approach, ...)
            hints: Optional length/budget/timeline/evaluation/past-performance hints
            persona_id: Persona whose system prompt replaces the role template

        Returns:
            GenerationResult with content and word count
        """
        label = section_type or "general"
        try:
            logger.info(f"Generating {label} section")

            system_prompt = await self._resolve_system_prompt(section_type, persona_id)
            request = self._request(
                build_generation_prompt(prompt, hints, section_type, system_prompt),
                SECTION_SAMPLING
            )
            content = await self.gateway.generate(request)
            generated_at = _utcnow()

            logger.info(f"Generated {len(content)} characters for {label}")

            return GenerationResult(
                content=content,
                section_type=section_type,
                word_count=count_words(content),
                generated_at=generated_at,
                model=request.model
            )

        except Exception as e:
            logger.error(f"Error generating {label} section: {e}")
            raise

    async def analyze_solicitation(self, document_text: str) -> SolicitationAnalysis:
        """
        Analyze a solicitation and pull out categorized requirements.

        Only the first 4000 characters of the document reach the model.
        """
        try:
            logger.info("Analyzing solicitation document")

            request = self._request(build_analysis_prompt(document_text), ANALYSIS_SAMPLING)
            analysis = await self.gateway.generate(request)
            analyzed_at = _utcnow()

            requirements = parse_requirements(analysis)
            logger.info(
                f"Analysis complete: {len(analysis)} characters, "
                f"{len(requirements.technical)} technical, "
                f"{len(requirements.compliance)} compliance, "
                f"{len(requirements.deliverables)} deliverables"
            )

            return SolicitationAnalysis(
                analysis=analysis,
                extracted_requirements=requirements,
                analyzed_at=analyzed_at
            )

        except Exception as e:
            logger.error(f"Error analyzing solicitation: {e}")
            raise

    async def improve_content(
        self,
        content: str,
        improvement_type: str = ImprovementType.GENERAL.value
    ) -> ContentImprovementResult:
        """Rewrite content for clarity, technical depth, persuasion or compliance."""
        try:
            logger.info(f"Improving content: {improvement_type}")

            request = self._request(
                build_improvement_prompt(content, improvement_type),
                IMPROVEMENT_SAMPLING
            )
            improved = await self.gateway.generate(request)
            improved_at = _utcnow()

            logger.info(f"Improved content: {len(content)} -> {len(improved)} characters")

            return ContentImprovementResult(
                original_content=content,
                improved_content=improved,
                improvement_type=improvement_type,
                improved_at=improved_at
            )

        except Exception as e:
            logger.error(f"Error improving content: {e}")
            raise

    async def generate_executive_summary(
        self,
        proposal: Union[ProposalSnapshot, Dict[str, Any], None]
    ) -> ExecutiveSummaryResult:
        """Write an executive summary from proposal data."""
        try:
            logger.info("Generating executive summary")

            if not isinstance(proposal, ProposalSnapshot):
                proposal = ProposalSnapshot.model_validate(proposal or {})

            request = self._request(build_executive_summary_prompt(proposal), SUMMARY_SAMPLING)
            summary = await self.gateway.generate(request)
            generated_at = _utcnow()

            logger.info(f"Generated executive summary: {len(summary)} characters")

            return ExecutiveSummaryResult(
                executive_summary=summary,
                based_on=proposal,
                generated_at=generated_at
            )

        except Exception as e:
            logger.error(f"Error generating executive summary: {e}")
            raise

    async def is_available(self) -> bool:
        """Whether the Ollama server is reachable."""
        return await self.gateway.is_available()

    async def list_models(self) -> List[ModelInfo]:
        """Models installed on the Ollama server."""
        return await self.gateway.list_models()


# Singleton instance
writing_service = WritingService()

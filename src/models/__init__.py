"""Models package - All Pydantic models organized by domain."""

from src.models.enums import SectionType, ImprovementType, SettingType
from src.models.generation import (
    SamplingOptions,
    GenerationRequest,
    RequirementHints,
    GenerationResult,
    ModelInfo,
)
from src.models.analysis import ExtractedRequirements, SolicitationAnalysis
from src.models.proposal import ProposalSnapshot, ContentImprovementResult, ExecutiveSummaryResult
from src.models.persona import Persona, GlobalSetting

__all__ = [
    # Enums
    "SectionType",
    "ImprovementType",
    "SettingType",
    # Generation models
    "SamplingOptions",
    "GenerationRequest",
    "RequirementHints",
    "GenerationResult",
    "ModelInfo",
    # Analysis models
    "ExtractedRequirements",
    "SolicitationAnalysis",
    # Proposal models
    "ProposalSnapshot",
    "ContentImprovementResult",
    "ExecutiveSummaryResult",
    # Store records
    "Persona",
    "GlobalSetting",
]

"""Solicitation analysis models."""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class ExtractedRequirements(BaseModel):
    """Requirement buckets pulled out of a free-text analysis."""
    technical: List[str] = Field(default_factory=list, description="Technical requirements")
    compliance: List[str] = Field(default_factory=list, description="Compliance requirements")
    deliverables: List[str] = Field(default_factory=list, description="Deliverables")
    timeline: Optional[str] = Field(None, description="Timeline summary")

    class Config:
        frozen = True


class SolicitationAnalysis(BaseModel):
    """Result of analyzing a solicitation document."""
    analysis: str = Field(..., description="Raw analysis text from the model")
    extracted_requirements: ExtractedRequirements = Field(
        default_factory=ExtractedRequirements,
        description="Categorized requirements"
    )
    analyzed_at: datetime = Field(..., description="When the model call returned")

    class Config:
        frozen = True

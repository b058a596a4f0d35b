"""Proposal content models."""

from typing import Optional, Any
from datetime import datetime
from pydantic import BaseModel, Field


class ProposalSnapshot(BaseModel):
    """
    Proposal data an executive summary is written from.

    Field values are taken as given (text, lists, numbers) and rendered
    as text in the prompt. Keys beyond the summary fields are kept.
    """
    project_name: Optional[Any] = Field(None, alias="projectName", description="Project name")
    agency: Optional[Any] = Field(None, description="Issuing agency")
    requirements: Optional[Any] = Field(None, description="Key requirements")
    technical_approach: Optional[Any] = Field(
        None,
        alias="technicalApproach",
        description="Technical approach summary"
    )
    past_performance: Optional[Any] = Field(
        None,
        alias="pastPerformance",
        description="Past performance highlights"
    )
    management: Optional[Any] = Field(None, description="Management approach")

    class Config:
        frozen = True
        populate_by_name = True
        extra = "allow"


class ContentImprovementResult(BaseModel):
    """Original and rewritten content."""
    original_content: str = Field(..., description="Content as submitted")
    improved_content: str = Field(..., description="Model rewrite")
    improvement_type: str = Field(..., description="Improvement category tag")
    improved_at: datetime = Field(..., description="When the model call returned")

    class Config:
        frozen = True


class ExecutiveSummaryResult(BaseModel):
    """Generated executive summary and the data it was based on."""
    executive_summary: str = Field(..., description="Summary text")
    based_on: ProposalSnapshot = Field(..., description="Source proposal data, extra keys included")
    generated_at: datetime = Field(..., description="When the model call returned")

    class Config:
        frozen = True

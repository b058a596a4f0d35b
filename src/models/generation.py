"""Models for inference requests and generated sections."""

from typing import Optional, Union, Dict, Any
from datetime import datetime
from pydantic import BaseModel, Field


class SamplingOptions(BaseModel):
    """Sampling parameters sent with a generation request."""
    temperature: float = Field(..., ge=0, le=1, description="Sampling temperature")
    top_p: Optional[float] = Field(None, ge=0, le=1, description="Nucleus sampling cutoff")
    max_tokens: int = Field(..., gt=0, description="Maximum tokens to generate")

    class Config:
        frozen = True


class GenerationRequest(BaseModel):
    """Body of a single Ollama /api/generate call."""
    model: str = Field(..., description="Model identifier")
    prompt: str = Field(..., description="Full prompt text")
    stream: bool = Field(False, description="Streaming flag (always off)")
    options: SamplingOptions = Field(..., description="Sampling options")

    class Config:
        frozen = True

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the wire, leaving out unset sampling options."""
        return self.model_dump(exclude_none=True)


class RequirementHints(BaseModel):
    """Optional structured requirements supplied with a section prompt."""
    length: Optional[Union[int, str]] = Field(None, description="Target length, e.g. 500 or '500-800'")
    budget: Optional[Union[str, int, float]] = Field(None, description="Budget considerations")
    timeline: Optional[str] = Field(None, description="Timeline note")
    evaluation_criteria: Optional[str] = Field(
        None,
        alias="evaluationCriteria",
        description="Evaluation criteria to address"
    )
    past_performance: Optional[str] = Field(
        None,
        alias="pastPerformance",
        description="Relevant past performance"
    )

    class Config:
        frozen = True
        populate_by_name = True
        extra = "ignore"


class GenerationResult(BaseModel):
    """A generated proposal section."""
    content: str = Field(..., description="Generated text")
    section_type: Optional[str] = Field(None, description="Section category tag")
    word_count: int = Field(..., ge=0, description="Whitespace-delimited word count")
    generated_at: datetime = Field(..., description="When the model call returned")
    model: str = Field(..., description="Model that produced the text")

    class Config:
        frozen = True


class ModelInfo(BaseModel):
    """One entry of the Ollama model catalog."""
    name: str = Field(..., description="Model tag, e.g. qwen2.5:14b")
    model: Optional[str] = Field(None, description="Model reference")
    size: Optional[int] = Field(None, description="Size on disk in bytes")
    digest: Optional[str] = Field(None, description="Content digest")
    modified_at: Optional[str] = Field(None, description="Last modification time")
    details: Dict[str, Any] = Field(default_factory=dict, description="Format and family details")

    class Config:
        frozen = True
        extra = "allow"

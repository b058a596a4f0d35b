"""Intelligence module - Prompt composition and response interpretation."""

from src.intelligence.prompts import (
    get_system_prompt,
    build_section_prompt,
    build_generation_prompt,
    build_analysis_prompt,
    build_improvement_prompt,
    build_executive_summary_prompt,
)
from src.intelligence.requirements_parser import parse_requirements

__all__ = [
    "get_system_prompt",
    "build_section_prompt",
    "build_generation_prompt",
    "build_analysis_prompt",
    "build_improvement_prompt",
    "build_executive_summary_prompt",
    "parse_requirements",
]

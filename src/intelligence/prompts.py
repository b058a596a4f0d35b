"""Prompt templates and builders for proposal writing.

Every builder here is a pure function of its inputs: no I/O, no clock,
no randomness. Unknown section or improvement types fall back to the
``general`` template, so every input maps to a usable prompt.
"""

from typing import Optional, Union, Dict, Any

from src.models import SectionType, ImprovementType, RequirementHints, ProposalSnapshot

MAX_DOCUMENT_CHARS = 4000


# ===========================================
# Role System Prompts
# ===========================================

SYSTEM_PROMPTS: Dict[SectionType, str] = {
    SectionType.TECHNICAL_APPROACH: (
        "You are an expert technical writer specializing in government proposals. "
        "Write clear, detailed technical approaches that demonstrate deep understanding "
        "of requirements and proven methodologies."
    ),
    SectionType.MANAGEMENT_PLAN: (
        "You are an expert project manager and proposal writer. Create comprehensive "
        "management plans that show strong leadership, clear processes, and risk "
        "mitigation strategies."
    ),
    SectionType.PAST_PERFORMANCE: (
        "You are an expert at writing compelling past performance narratives. Highlight "
        "relevant experience, successful outcomes, and lessons learned that directly "
        "relate to the current requirement."
    ),
    SectionType.EXECUTIVE_SUMMARY: (
        "You are an expert proposal writer. Create compelling executive summaries that "
        "capture attention, demonstrate understanding, and persuade evaluators of your "
        "capabilities."
    ),
    SectionType.GENERAL: (
        "You are an expert government proposal writer with deep knowledge of federal "
        "acquisition requirements and evaluation criteria. Write professional, compliant, "
        "and persuasive content."
    ),
}


# ===========================================
# Improvement Instructions
# ===========================================

IMPROVEMENT_PROMPTS: Dict[ImprovementType, str] = {
    ImprovementType.CLARITY: (
        "Improve the clarity and readability of this content while maintaining "
        "technical accuracy"
    ),
    ImprovementType.TECHNICAL: "Enhance the technical depth and accuracy of this content",
    ImprovementType.PERSUASIVE: (
        "Make this content more persuasive and compelling for government evaluators"
    ),
    ImprovementType.COMPLIANCE: (
        "Ensure this content addresses compliance requirements and evaluation criteria"
    ),
    ImprovementType.GENERAL: (
        "Improve the overall quality, clarity, and persuasiveness of this content"
    ),
}


ANALYSIS_TEMPLATE = """
Analyze this government solicitation document and extract key information:

Document:
{document}...

Please provide a structured analysis including:
1. Project overview and objectives
2. Key technical requirements
3. Proposal sections required
4. Evaluation criteria
5. Compliance requirements
6. Important dates and deadlines
7. Recommended proposal structure

Format your response as structured text with clear headings.
"""

IMPROVEMENT_TEMPLATE = """
{instruction}:

Original content:
{content}

Please provide the improved version while maintaining the original structure and key points.
"""

EXECUTIVE_SUMMARY_TEMPLATE = """
Create a compelling executive summary for this government proposal:

Project: {project_name}
Agency: {agency}
Key Requirements: {requirements}

Technical Approach Summary:
{technical_approach}

Past Performance Highlights:
{past_performance}

Management Approach:
{management}

Create a professional, compelling executive summary that:
- Clearly states our understanding of the requirement
- Highlights our unique qualifications
- Demonstrates value to the government
- Is persuasive yet factual
- Follows government proposal best practices

Keep it concise but comprehensive (2-3 paragraphs).
"""

SUMMARY_PLACEHOLDERS = {
    "project_name": "Government Project",
    "agency": "Government Agency",
    "requirements": "As specified in the solicitation",
    "technical_approach": "Our proven technical methodology",
    "past_performance": "Relevant experience with similar projects",
    "management": "Experienced team and proven processes",
}


def _section_type(value: Optional[str]) -> SectionType:
    try:
        return SectionType(value)
    except ValueError:
        return SectionType.GENERAL


def _improvement_type(value: Optional[str]) -> ImprovementType:
    try:
        return ImprovementType(value)
    except ValueError:
        return ImprovementType.GENERAL


def get_system_prompt(section_type: Optional[str]) -> str:
    """Role system prompt for a section type, ``general`` for anything unknown."""
    return SYSTEM_PROMPTS[_section_type(section_type)]


def _coerce_hints(hints: Union[RequirementHints, Dict[str, Any], None]) -> RequirementHints:
    if hints is None:
        return RequirementHints()
    if isinstance(hints, RequirementHints):
        return hints
    return RequirementHints.model_validate(hints)


def build_section_prompt(
    user_prompt: str,
    hints: Union[RequirementHints, Dict[str, Any], None],
    section_type: Optional[str]
) -> str:
    """
    Append structured requirement blocks to a user prompt.

    Blocks are added in a fixed order: Key Requirements (length, budget,
    timeline), Evaluation Criteria, Relevant Past Performance, then the
    closing instruction naming the section type.

    Args:
        user_prompt: Free-text instructions from the writer
        hints: Optional requirement hints (model or plain dict)
        section_type: Section category named in the closing line

    Returns:
        Prompt text without the system prompt
    """
    hints = _coerce_hints(hints)
    prompt = user_prompt

    if hints.length or hints.budget or hints.timeline:
        prompt += "\n\nKey Requirements:"
        if hints.length:
            prompt += f"\n- Target length: {hints.length} words"
        if hints.budget:
            prompt += f"\n- Budget considerations: {hints.budget}"
        if hints.timeline:
            prompt += f"\n- Timeline: {hints.timeline}"

    if hints.evaluation_criteria:
        prompt += f"\n\nEvaluation Criteria to Address:\n{hints.evaluation_criteria}"

    if hints.past_performance:
        prompt += f"\n\nRelevant Past Performance:\n{hints.past_performance}"

    label = section_type.value if isinstance(section_type, SectionType) else section_type
    prompt += (
        f"\n\nPlease write a professional {label or SectionType.GENERAL.value} "
        "section that addresses these requirements."
    )

    return prompt


def build_generation_prompt(
    user_prompt: str,
    hints: Union[RequirementHints, Dict[str, Any], None],
    section_type: Optional[str],
    system_prompt: Optional[str] = None
) -> str:
    """Full text sent to the model: system prompt, blank line, section prompt."""
    system_prompt = system_prompt or get_system_prompt(section_type)
    return f"{system_prompt}\n\n{build_section_prompt(user_prompt, hints, section_type)}"


def truncate_document(document_text: str) -> str:
    """First MAX_DOCUMENT_CHARS characters of a document."""
    return document_text[:MAX_DOCUMENT_CHARS]


def build_analysis_prompt(document_text: str) -> str:
    """Solicitation analysis prompt; long documents are cut silently."""
    return ANALYSIS_TEMPLATE.format(document=truncate_document(document_text))


def build_improvement_prompt(content: str, improvement_type: Optional[str]) -> str:
    """Rewrite prompt for one of the improvement types."""
    instruction = IMPROVEMENT_PROMPTS[_improvement_type(improvement_type)]
    return IMPROVEMENT_TEMPLATE.format(instruction=instruction, content=content)


def build_executive_summary_prompt(
    snapshot: Union[ProposalSnapshot, Dict[str, Any], None]
) -> str:
    """Executive summary prompt; missing fields get neutral placeholders."""
    if snapshot is None:
        snapshot = ProposalSnapshot()
    elif not isinstance(snapshot, ProposalSnapshot):
        snapshot = ProposalSnapshot.model_validate(snapshot)

    fields = {
        name: _as_text(getattr(snapshot, name)) or placeholder
        for name, placeholder in SUMMARY_PLACEHOLDERS.items()
    }
    return EXECUTIVE_SUMMARY_TEMPLATE.format(**fields)


def _as_text(value: Any) -> str:
    """Render a proposal field for the prompt; falsy values become ''."""
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)

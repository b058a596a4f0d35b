"""Keyword-based extraction of requirement lists from analysis text."""

import re
from typing import Dict, List, Optional

from src.models import ExtractedRequirements

# Header keywords in priority order; the first match on a line wins.
SECTION_KEYWORDS = (
    ("technical requirement", "technical"),
    ("compliance", "compliance"),
    ("deliverable", "deliverables"),
)

_BULLET_PREFIX = re.compile(r"^-\s*")


def _match_section(line: str) -> Optional[str]:
    lowered = line.lower()
    for keyword, section in SECTION_KEYWORDS:
        if keyword in lowered:
            return section
    return None


def parse_requirements(analysis_text: str) -> ExtractedRequirements:
    """
    Sort bullet lines of a model analysis into requirement buckets.

    A line naming a section ("technical requirement", "compliance",
    "deliverable") moves the cursor to that bucket; later lines
    containing a hyphen are added to it with any leading "- " removed.
    Everything else is skipped. This is a heuristic: bullets without a
    hyphen, or headers worded differently, are silently dropped.
    The timeline field is never filled in.
    """
    buckets: Dict[str, List[str]] = {section: [] for _, section in SECTION_KEYWORDS}
    current: Optional[str] = None

    for raw_line in analysis_text.split("\n"):
        line = raw_line.strip()
        section = _match_section(line)
        if section:
            current = section
        elif "-" in line and current:
            buckets[current].append(_BULLET_PREFIX.sub("", line, count=1))

    return ExtractedRequirements(**buckets, timeline=None)

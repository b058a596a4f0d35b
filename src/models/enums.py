"""Enumeration types for the proposal writer."""

from enum import Enum


class SectionType(str, Enum):
    """Proposal section categories with a dedicated writer role."""
    TECHNICAL_APPROACH = "technical-approach"
    MANAGEMENT_PLAN = "management-plan"
    PAST_PERFORMANCE = "past-performance"
    EXECUTIVE_SUMMARY = "executive-summary"
    GENERAL = "general"


class ImprovementType(str, Enum):
    """Kinds of rewrite the improve-content operation supports."""
    CLARITY = "clarity"
    TECHNICAL = "technical"
    PERSUASIVE = "persuasive"
    COMPLIANCE = "compliance"
    GENERAL = "general"


class SettingType(str, Enum):
    """Storage types for global settings values."""
    BOOLEAN = "boolean"
    NUMBER = "number"
    JSON = "json"
    STRING = "string"

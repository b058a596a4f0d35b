"""Read-only views of settings and persona records."""

from typing import Optional, Any
from datetime import datetime
from pydantic import BaseModel, Field

from src.models.enums import SettingType


class Persona(BaseModel):
    """AI writing persona with its own system prompt."""
    id: Any = Field(..., description="Database record ID")
    name: str = Field(..., description="Unique persona name")
    display_name: Optional[str] = Field(None, description="Name shown to users")
    description: Optional[str] = Field(None, description="Short description")
    system_prompt: Optional[str] = Field(None, description="System prompt used for writing")
    specialty: Optional[str] = Field(None, description="Area of specialty")
    writing_style: Optional[str] = Field("Professional", description="Writing style")
    is_active: bool = Field(True, description="Whether the persona can be used")
    is_default: bool = Field(False, description="Whether this is the default persona")
    created_at: Optional[datetime] = Field(None, description="Record creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    class Config:
        frozen = True
        from_attributes = True
        extra = "ignore"


class GlobalSetting(BaseModel):
    """Application-wide setting stored as text with a declared type."""
    setting_key: str = Field(..., description="Setting key")
    setting_value: Optional[str] = Field(None, description="Stored string value")
    setting_type: SettingType = Field(SettingType.STRING, description="Value type")
    description: Optional[str] = Field(None, description="What the setting controls")
    category: Optional[str] = Field("general", description="Settings category")
    is_public: bool = Field(False, description="Visible to non-admin clients")

    class Config:
        frozen = True
        from_attributes = True
        extra = "ignore"

"""Supabase lookups for global settings and writing personas."""

import json
import logging
from typing import Optional, Any, List
from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions

from src.core.config import get_settings
from src.core.errors import NotFoundError
from src.models import GlobalSetting, Persona, SettingType

logger = logging.getLogger(__name__)


# ===========================================
# Setting Value Codec
# ===========================================

def parse_setting_value(value: Optional[str], setting_type: str) -> Any:
    """
    Convert a stored setting string into its typed value.

    Args:
        value: Stored text (or None)
        setting_type: One of boolean, number, json, string

    Returns:
        Typed value; unparseable numbers become 0 and unparseable JSON None

    Numbers must be entirely numeric: "3px" parses to 0, not 3 as a
    leading-prefix parser would read it. Values written by
    stringify_setting_value are always entirely numeric.
    """
    if value is None:
        return None

    if setting_type == SettingType.BOOLEAN:
        return value is True or value == "true"
    if setting_type == SettingType.NUMBER:
        try:
            return float(value)
        except (ValueError, TypeError):
            return 0
    if setting_type == SettingType.JSON:
        try:
            return json.loads(value)
        except (ValueError, TypeError):
            return None
    return str(value)


def stringify_setting_value(value: Any, setting_type: str) -> Optional[str]:
    """Convert a typed value to its stored string form."""
    if value is None:
        return None

    if setting_type == SettingType.BOOLEAN:
        return "true" if value else "false"
    if setting_type == SettingType.NUMBER:
        number = float(value)
        return str(int(number)) if number.is_integer() else str(number)
    if setting_type == SettingType.JSON:
        return json.dumps(value)
    return str(value)


class DatabaseService:
    """
    Read-only access to the global_settings and personas tables.

    Writes (persona CRUD, default-record uniqueness) belong to the
    admin application; this service only answers lookups.
    """

    SETTINGS_TABLE = "global_settings"
    PERSONAS_TABLE = "personas"
    DEFAULT_PERSONA_KEY = "default_persona_id"

    def __init__(self):
        """Initialize Supabase client."""
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        """Lazy initialization of Supabase client."""
        if self._client is None:
            settings = get_settings()
            if not settings.supabase_configured:
                raise ValueError("Supabase credentials not configured")

            self._client = create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_KEY,
                options=ClientOptions(
                    postgrest_client_timeout=30,
                    storage_client_timeout=30
                )
            )
            logger.info("Supabase client initialized")
        return self._client

    # ===========================================
    # Settings
    # ===========================================

    async def get_setting(self, setting_key: str) -> GlobalSetting:
        """Fetch a setting record by key."""
        response = (
            self.client.table(self.SETTINGS_TABLE)
            .select("*")
            .eq("setting_key", setting_key)
            .limit(1)
            .execute()
        )

        if not response.data:
            raise NotFoundError("Setting", setting_key)

        return GlobalSetting(**response.data[0])

    async def get_setting_value(self, setting_key: str, default: Any = None) -> Any:
        """Fetch a setting parsed to its declared type, or the default."""
        try:
            setting = await self.get_setting(setting_key)
        except NotFoundError:
            return default
        except Exception as e:
            logger.error(f"Error getting setting value {setting_key}: {e}")
            return default

        return parse_setting_value(setting.setting_value, setting.setting_type)

    async def get_default_persona_id(self) -> Optional[str]:
        """Persona ID configured as the default for AI writing."""
        return await self.get_setting_value(self.DEFAULT_PERSONA_KEY, None)

    # ===========================================
    # Personas
    # ===========================================

    async def get_persona(self, persona_id: Any) -> Persona:
        """Fetch persona by ID."""
        response = (
            self.client.table(self.PERSONAS_TABLE)
            .select("*")
            .eq("id", persona_id)
            .limit(1)
            .execute()
        )

        if not response.data:
            raise NotFoundError("Persona", str(persona_id))

        return Persona(**response.data[0])

    async def get_default_persona(self) -> Optional[Persona]:
        """Fetch the active default persona, if one is set."""
        response = (
            self.client.table(self.PERSONAS_TABLE)
            .select("*")
            .eq("is_default", True)
            .eq("is_active", True)
            .limit(1)
            .execute()
        )

        if response.data:
            return Persona(**response.data[0])

        logger.warning("No default persona configured")
        return None

    async def list_personas(self, active_only: bool = True) -> List[Persona]:
        """List personas, default first then by display name."""
        query = self.client.table(self.PERSONAS_TABLE).select("*")
        if active_only:
            query = query.eq("is_active", True)

        response = (
            query
            .order("is_default", desc=True)
            .order("display_name")
            .execute()
        )

        return [Persona(**row) for row in response.data or []]


# Singleton instance
db_service = DatabaseService()

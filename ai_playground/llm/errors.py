"""Sentinel results returned in place of raising errors."""
from enum import Enum


class Sentinel(str, Enum):
    """Well-known failure results handed back as plain strings."""
    NOT_INITIALIZED = "Error: LLM Interface not initialized"
    API_KEY_MISSING = "Error: API key not set"
    INVALID_TEMPLATE_INDEX = "Invalid template index"

    def __str__(self) -> str:
        return self.value

"""
Registry Domain Models

Pydantic model for country records. Records are immutable once built so a
registry can hand them out without copying.
"""

from typing import Any

from pydantic import BaseModel, Field

from .enums import LookupKey


class CountryRecord(BaseModel):
    """ISO 3166-1 country identifiers plus associated currency codes."""
    name: str = Field(..., description="Display name")
    alpha2: str = Field(..., description="ISO 3166-1 alpha-2 country code")
    alpha3: str = Field(..., description="ISO 3166-1 alpha-3 country code")
    numeric: str = Field(..., description="ISO 3166-1 numeric code, zero-padded to 3 digits")
    currency: tuple[str, ...] = Field(default_factory=tuple, description="ISO 4217 currency codes")

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "allow"  # Carry application-specific fields untouched

    def __getitem__(self, key: str | LookupKey) -> Any:
        """Mapping-style field access, e.g. ``record["alpha2"]``."""
        field = key.value if isinstance(key, LookupKey) else key
        if field in type(self).model_fields:
            return getattr(self, field)
        extra = self.model_extra or {}
        if field in extra:
            return extra[field]
        raise KeyError(key)

    def get(self, key: str | LookupKey, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def as_dict(self) -> dict[str, Any]:
        """Plain dictionary suitable for JSON/YAML serialization."""
        data = self.model_dump()
        data["currency"] = list(self.currency)
        return data

    def __str__(self) -> str:
        return f"{self.name} ({self.alpha2})"

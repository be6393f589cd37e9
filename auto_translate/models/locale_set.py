"""
Locale Set - Ordered list of supported locale codes
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class LocaleSet(BaseModel):
    """Supported locales, in configuration order, without duplicates"""

    locales: List[str] = Field(
        default_factory=list,
        description="Supported locale codes (e.g., ['en', 'fr', 'de'])"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"locales": ["en", "fr", "de"]}
        }

    @field_validator("locales")
    @classmethod
    def _normalize(cls, value: List[str]) -> List[str]:
        seen = []
        for code in value:
            code = code.strip()
            if not code:
                raise ValueError("locale codes must be non-empty")
            if code not in seen:
                seen.append(code)
        return seen

    def targets(self, source_locale: str) -> List[str]:
        """Every supported locale except the source, order preserved"""
        return [code for code in self.locales if code != source_locale]

    def __contains__(self, locale: str) -> bool:
        return locale in self.locales

    def __len__(self) -> int:
        return len(self.locales)

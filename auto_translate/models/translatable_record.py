"""
Translatable Record - A persisted record with per-locale text attributes
"""

import copy
from typing import Any, Dict, List, Mapping, Optional, Protocol

from pydantic import BaseModel, Field


# field -> locale -> text
Translations = Dict[str, Dict[str, Optional[str]]]


class Translatable(Protocol):
    """Capability interface a record type must provide to be auto-translated"""

    translatable_fields: List[str]
    source_locale: str
    translations: Translations


class TranslatableRecord(BaseModel):
    """Record whose translatable attributes are filled for every supported locale"""

    # Identifiers
    id: str = Field(..., description="Opaque record identifier")

    # Translation data
    translations: Translations = Field(
        default_factory=dict,
        description="Per-field mapping of locale code to text"
    )
    source_locale: str = Field(
        default="",
        description="Locale the record was authored in (e.g., en)"
    )
    translatable_fields: List[str] = Field(
        default_factory=list,
        description="Attributes eligible for automatic translation"
    )

    # Trigger flags
    auto_translate: bool = Field(
        default=True,
        description="Whether saves of this record trigger translation"
    )
    skip_translation: bool = Field(
        default=False,
        description="One-off switch to suppress translation for a save"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "page-42",
                "translations": {
                    "title": {"en": "Hello World"},
                    "slug": {"en": "hello-world"}
                },
                "source_locale": "en",
                "translatable_fields": ["title", "slug"]
            }
        }

    def should_auto_translate(self) -> bool:
        return self.auto_translate

    def get_translation(self, field_name: str, locale: str) -> Optional[str]:
        """Text for a field in a locale, or None when there is none"""
        return self.translations.get(field_name, {}).get(locale)

    def with_translations(self, translations: Translations) -> "TranslatableRecord":
        """Copy of this record carrying the given translation mapping"""
        return self.model_copy(update={"translations": copy.deepcopy(translations)})

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        default_source_locale: Optional[str] = None
    ) -> "TranslatableRecord":
        """
        Build a record from a plain mapping (e.g., a JSON document).

        Args:
            data: Record fields as stored
            default_source_locale: Used when the mapping has no source locale

        Returns:
            TranslatableRecord
        """
        values = dict(data)
        if not values.get("source_locale") and default_source_locale:
            values["source_locale"] = default_source_locale
        return cls(**values)

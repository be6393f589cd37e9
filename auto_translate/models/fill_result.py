"""
Translation Result - Output of one gap-filling run over a record
"""

from typing import List

from pydantic import BaseModel, Field

from .translatable_record import Translations


class FieldLocale(BaseModel):
    """A (field, locale) pair"""

    field_name: str = Field(..., description="Translatable attribute name")
    locale: str = Field(..., description="Target locale code")

    class Config:
        frozen = True


class TranslationResult(BaseModel):
    """Updated translation mapping plus what changed"""

    translations: Translations = Field(
        default_factory=dict,
        description="Input mapping with newly filled entries added"
    )
    changed: bool = Field(
        default=False,
        description="True if at least one entry was added"
    )

    # Diagnostics
    filled: List[FieldLocale] = Field(
        default_factory=list,
        description="Pairs translated during this run"
    )
    failed: List[FieldLocale] = Field(
        default_factory=list,
        description="Pairs whose translator call failed"
    )
    skipped_fields: List[str] = Field(
        default_factory=list,
        description="Fields skipped because their source text is empty"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "translations": {
                    "title": {
                        "en": "Hello World",
                        "fr": "Bonjour le monde",
                        "de": "Hallo Welt"
                    }
                },
                "changed": True,
                "filled": [
                    {"field_name": "title", "locale": "fr"},
                    {"field_name": "title", "locale": "de"}
                ],
                "failed": [],
                "skipped_fields": ["slug"]
            }
        }

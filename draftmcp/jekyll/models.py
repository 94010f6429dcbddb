from __future__ import annotations

"""
Typed contract for writeJekyllDraft params.

Design intent:
- Reject wrongly shaped payloads at the API boundary.
- Treat JSON null the same as an omitted field.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JekyllDraft(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = ""
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    series: str = ""
    summary: str = ""
    body: str = ""
    path: str = ""

    @field_validator("title", "series", "summary", "body", "path", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", "categories", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value

    def has_required_fields(self) -> bool:
        return bool(self.title) and bool(self.path)

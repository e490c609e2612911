from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class ConfigZone(BaseModel):
    name: str
    location: str

    @field_validator("name", "location")
    @classmethod
    def strip_value(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class AeonConfig(BaseModel):
    zones: List[ConfigZone] = Field(default_factory=list)

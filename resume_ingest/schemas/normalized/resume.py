from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _RecordModel(BaseModel):
    """Snake_case fields that also read and write the camelCase UI names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value


class PersonalInfo(_RecordModel):
    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""


class Entry(_RecordModel):
    title: str = ""
    subtitle: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    bullets: list[str] = Field(default_factory=list)
    description: str = ""

    @model_validator(mode="after")
    def _sync_bullets_and_description(self) -> "Entry":
        if self.bullets and not self.description:
            self.description = "\n".join(self.bullets)
        elif self.description and not self.bullets:
            self.bullets = [line.strip() for line in self.description.splitlines() if line.strip()]
        return self

    def is_blank(self) -> bool:
        return not (self.title.strip() or self.subtitle.strip() or self.bullets)


class NormalizedResume(_RecordModel):
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[Entry] = Field(default_factory=list)
    projects: list[Entry] = Field(default_factory=list)
    education: list[Entry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    conferences: list[str] = Field(default_factory=list)
    publications: list[str] = Field(default_factory=list)
    awards: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    language: str = "en"

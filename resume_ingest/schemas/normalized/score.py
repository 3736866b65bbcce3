from __future__ import annotations

from pydantic import BaseModel, Field


class ScoreResult(BaseModel):
    value: int = Field(ge=0, le=100)
    feedback: list[str] = Field(default_factory=list)

from __future__ import annotations

"""Answer choice: an id + text pair owned by a question."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    text: str = Field(min_length=1)

    @field_validator("text")
    def _not_blank(cls, v: str) -> str:  # type: ignore[override]
        if not v.strip():
            raise ValueError("answer text must not be blank")
        return v

    def __str__(self) -> str:
        return f"{self.id}. {self.text}"

from __future__ import annotations

"""Subject: a named entity owning at most one exam."""

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .exam import Exam

if TYPE_CHECKING:
    from ..config.config import Limits


class Subject(BaseModel):
    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    exam: Optional[Exam] = None

    @field_validator("name")
    def _name_not_blank(cls, v: str) -> str:  # type: ignore[override]
        if not v.strip():
            raise ValueError("subject name must not be blank")
        return v

    def create_exam(self, ui: Dict[str, Callable[..., Any]], limits: Limits) -> None:
        """Interactively author an exam and attach it to this subject."""
        from ..app.authoring import author_exam

        self.exam = author_exam(self.name, ui, limits)

    def duplicate(self) -> "Subject":
        """Copy id and name; the exam is shared with the original, not cloned.

        Changes made through either subject's exam are visible from both.
        """
        return self.model_copy()

    def __str__(self) -> str:
        return f"Subject: {self.name} (ID: {self.id})"

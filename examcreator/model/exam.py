from __future__ import annotations

"""Exam variants as a tagged union on ``kind``.

A final exam is scored and accepts both question kinds; a practical exam is
unscored and accepts multiple choice questions only. How an exam is
administered lives in ``examcreator.exams``; these models only hold data.
"""

from datetime import timedelta
from typing import Annotated, ClassVar, FrozenSet, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .question import MCQ, TRUE_FALSE, Question


FINAL = "final"
PRACTICAL = "practical"


class _ExamFields(BaseModel):
    accepted_kinds: ClassVar[FrozenSet[str]] = frozenset()

    duration: timedelta
    question_count: int = Field(ge=1)
    questions: List[Question] = Field(default_factory=list)

    @property
    def total_marks(self) -> int:
        return sum(q.mark for q in self.questions)

    @property
    def is_complete(self) -> bool:
        return len(self.questions) == self.question_count

    def add_question(self, question: Question) -> None:
        if question.kind not in self.accepted_kinds:
            raise ValueError(f"{self.kind} exams do not accept {question.kind} questions")  # type: ignore[attr-defined]
        if len(self.questions) >= self.question_count:
            raise ValueError(f"exam already holds its declared {self.question_count} questions")
        self.questions.append(question)

    def __str__(self) -> str:
        minutes = self.duration.total_seconds() / 60
        return f"Exam Details: {self.question_count} questions, Time Limit: {minutes:g} minutes."


class FinalExam(_ExamFields):
    accepted_kinds: ClassVar[FrozenSet[str]] = frozenset({MCQ, TRUE_FALSE})

    kind: Literal["final"] = FINAL


class PracticalExam(_ExamFields):
    accepted_kinds: ClassVar[FrozenSet[str]] = frozenset({MCQ})

    kind: Literal["practical"] = PRACTICAL


Exam = Annotated[Union[FinalExam, PracticalExam], Field(discriminator="kind")]


def by_question_count(exam: _ExamFields) -> int:
    """Sort key ordering exams by their declared question count."""
    return exam.question_count


def compare_exams(a: _ExamFields, b: Optional[_ExamFields]) -> int:
    """Three-way comparison by declared question count; a missing exam sorts first."""
    if b is None:
        return 1
    return (a.question_count > b.question_count) - (a.question_count < b.question_count)

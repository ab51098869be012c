from __future__ import annotations

"""Result dataclasses returned by exam administration."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..model.answer import Answer
from ..model.question import Question


@dataclass(frozen=True)
class ReviewEntry:
    question: Question
    correct: Answer
    chosen: Optional[Answer] = None

    @property
    def is_correct(self) -> bool:
        return self.chosen is not None and self.chosen.id == self.correct.id


@dataclass
class ExamResult:
    """Outcome of one administration.

    ``earned``/``possible`` stay None for unscored (practical) exams; the
    review entries are kept in question order.
    """

    kind: str
    reviews: List[ReviewEntry] = field(default_factory=list)
    earned: Optional[int] = None
    possible: Optional[int] = None

    @property
    def scored(self) -> bool:
        return self.possible is not None


def format_grade(result: ExamResult) -> str:
    return f"Your Grade: {result.earned} out of {result.possible}"

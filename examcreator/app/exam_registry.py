from __future__ import annotations

"""Exam registry and metadata.

Lists the exam kinds in menu order, exposes which question kinds each one
accepts, and constructs exams and their administrators via simple factories.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, List, Tuple, Type

from ..exams.base import ExamAdministrator
from ..exams.final import FinalExamAdministrator
from ..exams.practical import PracticalExamAdministrator
from ..model.exam import FINAL, PRACTICAL, Exam, FinalExam, PracticalExam
from ..model.question import MCQ, TRUE_FALSE
from ..results.schema import ExamResult


QUESTION_KIND_LABELS: Dict[str, str] = {
    TRUE_FALSE: "True or False",
    MCQ: "MCQ (Multiple Choice)",
}


@dataclass(frozen=True)
class ExamMeta:
    id: str
    name: str
    question_kinds: Tuple[str, ...]
    model: Type[Any]
    administrator: Callable[[], ExamAdministrator]


def list_exams() -> List[ExamMeta]:
    return [
        ExamMeta(
            id=FINAL,
            name="Final Exam",
            question_kinds=(TRUE_FALSE, MCQ),
            model=FinalExam,
            administrator=FinalExamAdministrator,
        ),
        ExamMeta(
            id=PRACTICAL,
            name="Practical Exam",
            question_kinds=(MCQ,),
            model=PracticalExam,
            administrator=PracticalExamAdministrator,
        ),
    ]


def get_exam_meta(exam_id: str) -> ExamMeta:
    for m in list_exams():
        if m.id == exam_id:
            return m
    raise KeyError(f"Unknown exam kind: {exam_id}")


def make_exam(exam_id: str, *, minutes: int, question_count: int) -> Exam:
    m = get_exam_meta(exam_id)
    return m.model(duration=timedelta(minutes=minutes), question_count=question_count)


def administrator_for(exam: Exam) -> ExamAdministrator:
    return get_exam_meta(exam.kind).administrator()


def administer_exam(exam: Exam, ui: Dict[str, Callable[..., Any]]) -> ExamResult:
    """Run the exam with the administrator registered for its kind."""
    return administrator_for(exam).administer(exam, ui)

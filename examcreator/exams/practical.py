from __future__ import annotations

"""Practical exam administration: answers are collected but never scored."""

from typing import Any, Callable, Dict

from ..app.explain import trace as xtrace
from ..model.exam import Exam
from ..results.schema import ExamResult, ReviewEntry
from .base import collect_answer


class PracticalExamAdministrator:
    def administer(self, exam: Exam, ui: Dict[str, Callable[..., Any]]) -> ExamResult:
        inform = ui["inform"]
        inform("--- Starting Practical Exam ---")

        for i, question in enumerate(exam.questions, start=1):
            collect_answer(i, question, ui)

        result = ExamResult(
            kind=exam.kind,
            reviews=[ReviewEntry(question=q, correct=q.correct_answer) for q in exam.questions],
        )
        xtrace("exam_graded", kind=exam.kind, scored=False)

        inform("\n--- Practical Exam Review ---")
        inform("The correct answers are shown below:")
        for entry in result.reviews:
            inform(f"\nQ: {entry.question.body}")
            inform(f"Correct Answer: {entry.correct}")
        return result

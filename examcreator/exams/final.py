from __future__ import annotations

"""Final exam administration: scored, every answer reviewed."""

from typing import Any, Callable, Dict

from ..app.explain import trace as xtrace
from ..model.exam import Exam
from ..results.schema import ExamResult, ReviewEntry, format_grade
from .base import collect_answer


class FinalExamAdministrator:
    """Award a question's mark only when the chosen id equals the correct id."""

    def administer(self, exam: Exam, ui: Dict[str, Callable[..., Any]]) -> ExamResult:
        inform = ui["inform"]
        inform("--- Starting Final Exam ---")

        result = ExamResult(kind=exam.kind, earned=0, possible=0)
        for i, question in enumerate(exam.questions, start=1):
            result.possible += question.mark
            chosen = collect_answer(i, question, ui)
            entry = ReviewEntry(question=question, correct=question.correct_answer, chosen=chosen)
            if entry.is_correct:
                result.earned += question.mark
            result.reviews.append(entry)

        xtrace("exam_graded", kind=exam.kind, earned=result.earned, possible=result.possible)

        inform("\n--- Final Exam Results ---")
        inform(format_grade(result))
        inform("\nReview your answers:")
        for entry in result.reviews:
            inform(f"\nQ: {entry.question.body}")
            inform(f"Your Answer: {entry.chosen.text}")
            inform(f"Correct Answer: {entry.correct.text}")
        return result

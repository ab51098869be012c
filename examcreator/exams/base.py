from __future__ import annotations

"""Administrator interface and the per-question steps every exam kind shares."""

from typing import Any, Callable, Dict, Protocol

from ..app.explain import trace as xtrace
from ..model.answer import Answer
from ..model.exam import Exam
from ..model.question import Question
from ..results.schema import ExamResult
from ..util.prompt import ask_int

RULE = "--------------------------"


class ExamAdministrator(Protocol):
    def administer(self, exam: Exam, ui: Dict[str, Callable[..., Any]]) -> ExamResult: ...


def present_question(question: Question, ui: Dict[str, Callable[..., Any]]) -> None:
    inform = ui["inform"]
    for line in question.display_lines():
        inform(line)


def collect_answer(index: int, question: Question, ui: Dict[str, Callable[..., Any]]) -> Answer:
    """Show the question, read a valid answer id and return that answer."""
    present_question(question, ui)
    chosen_id = ask_int(ui, "Your answer (enter ID): ", (1, len(question.answers)))
    chosen = question.answer_by_id(chosen_id)
    xtrace("answer_recorded", index=index, chosen=chosen.id, correct=question.correct_answer.id)
    ui["inform"](RULE)
    return chosen

from __future__ import annotations

"""Interactive exam authoring.

Walks the user through exam kind, duration and question count, then builds
each question slot in turn. Bad input is re-prompted by the prompt helpers,
so the flow always runs to completion.
"""

from typing import Any, Callable, Dict, List

from ..config.config import Limits
from ..model.answer import Answer
from ..model.exam import Exam
from ..model.question import MCQ, TRUE_FALSE, MCQQuestion, Question, TrueOrFalseQuestion
from ..util.prompt import ask_int, ask_text
from .exam_registry import QUESTION_KIND_LABELS, list_exams, make_exam
from .explain import trace as xtrace

UI = Dict[str, Callable[..., Any]]


def _choose(ui: UI, title: str, labels: List[str]) -> int:
    """Print a numbered menu and return the chosen 0-based index."""
    ui["inform"]("\n".join([title] + [f"{i}. {label}" for i, label in enumerate(labels, start=1)]))
    return ask_int(ui, "", (1, len(labels))) - 1


def _true_false_question(ui: UI, body: str, mark: int) -> TrueOrFalseQuestion:
    correct_id = ask_int(ui, "What is the correct answer? (1 for True, 2 for False): ", (1, 2))
    return TrueOrFalseQuestion(body=body, mark=mark, correct_answer=correct_id)


def _mcq_question(ui: UI, body: str, mark: int, limits: Limits) -> MCQQuestion:
    inform = ui["inform"]
    num_choices = ask_int(ui, "How many answer choices for this question? ", limits.mcq_choices)
    answers = [
        Answer(id=j, text=ask_text(ui, f"Enter text for answer choice {j}: "))
        for j in range(1, num_choices + 1)
    ]

    inform("Current Choices:")
    for a in answers:
        inform(str(a))

    correct_id = ask_int(ui, "Which choice is the correct answer? (Enter ID): ", (1, num_choices))
    correct = next(a for a in answers if a.id == correct_id)
    return MCQQuestion(body=body, mark=mark, answers=tuple(answers), correct_answer=correct)


def author_question(ui: UI, question_kind: str, limits: Limits) -> Question:
    body = ask_text(ui, "Enter the body of the question: ")
    mark = ask_int(ui, "Enter the mark for this question: ", limits.mark)
    if question_kind == TRUE_FALSE:
        return _true_false_question(ui, body, mark)
    return _mcq_question(ui, body, mark, limits)


def author_exam(subject_name: str, ui: UI, limits: Limits) -> Exam:
    inform = ui["inform"]
    inform(f"\n--- Creating Exam for {subject_name} ---")

    kinds = list_exams()
    meta = kinds[_choose(ui, "Choose Exam Type:", [m.name for m in kinds])]

    minutes = ask_int(ui, "Enter the time for the exam (in minutes): ", limits.duration_minutes)
    count = ask_int(ui, "Enter the number of questions for the exam: ", limits.questions)
    exam = make_exam(meta.id, minutes=minutes, question_count=count)
    xtrace("exam_created", subject=subject_name, kind=meta.id, minutes=minutes, questions=count)

    for i in range(1, count + 1):
        inform(f"\n--- Adding Question {i}/{count} ---")
        if len(meta.question_kinds) > 1:
            labels = [QUESTION_KIND_LABELS[k] for k in meta.question_kinds]
            question_kind = meta.question_kinds[_choose(ui, "Choose Question Type:", labels)]
        else:
            question_kind = meta.question_kinds[0]
            if question_kind == MCQ:
                inform(f"{meta.id.capitalize()} exams only support MCQ questions.")

        question = author_question(ui, question_kind, limits)
        exam.add_question(question)
        xtrace("question_added", index=i, kind=question.kind, mark=question.mark)

    inform("\nExam created successfully!")
    return exam

"""Exam data model: answers, questions, exams and subjects."""

from .answer import Answer  # noqa: F401
from .question import MCQQuestion, Question, TrueOrFalseQuestion  # noqa: F401
from .exam import Exam, FinalExam, PracticalExam, by_question_count, compare_exams  # noqa: F401
from .subject import Subject  # noqa: F401

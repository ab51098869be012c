from __future__ import annotations

"""Session Manager: runs one linear exam-creator session.

Phases run once each, in order: subject setup, exam authoring, then the
optional exam administration. It is console-agnostic; all I/O goes through
the UI callbacks.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..config.config import Limits
from ..model.subject import Subject
from ..results.schema import ExamResult
from ..util.prompt import ask_int, ask_text
from .exam_registry import administer_exam
from .explain import trace as xtrace


@dataclass
class RuntimeState:
    subject: Optional[Subject] = None
    result: Optional[ExamResult] = None


class SessionManager:
    def __init__(self, limits: Limits, ui: Dict[str, Callable[..., Any]]) -> None:
        self.limits = limits
        self.ui = ui
        self.state = RuntimeState()

    def _subject(self) -> Subject:
        if self.state.subject is None:
            raise RuntimeError("subject setup must run before authoring or administration")
        return self.state.subject

    def setup_subject(self) -> Subject:
        inform = self.ui["inform"]
        inform("Welcome to the Exam Creator!")
        inform("--- Subject Setup ---")
        subject_id = ask_int(self.ui, "Please enter the Subject ID: ", self.limits.subject_id)
        name = ask_text(self.ui, "Please enter the Subject Name: ")
        subject = Subject(id=subject_id, name=name)
        xtrace("subject_created", id=subject.id, name=subject.name)
        self.state.subject = subject
        return subject

    def author(self) -> None:
        self._subject().create_exam(self.ui, self.limits)

    def wants_to_start(self) -> bool:
        answer = self.ui["ask"]("\nDo you want to start the exam now? (yes/no): ")
        return (answer or "").strip().lower() == "yes"

    def administer(self) -> ExamResult:
        subject = self._subject()
        if subject.exam is None:
            raise RuntimeError("no exam has been authored for this session")
        self.ui["ask"]("\nPress Enter to start the exam...")
        self.ui.get("clear", lambda: None)()
        self.state.result = administer_exam(subject.exam, self.ui)
        return self.state.result

    def run(self) -> Optional[ExamResult]:
        self.setup_subject()
        self.author()
        if self.wants_to_start():
            self.administer()
        else:
            self.ui["inform"]("Exam is ready. You can take it later. Goodbye!")
        return self.state.result

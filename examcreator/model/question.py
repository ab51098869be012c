from __future__ import annotations

"""Question variants as a tagged union on ``kind``.

Both variants share the same fields and rendering; they differ only in how
the answer set is built. ``Question`` is the discriminated union used
wherever a question of either kind is accepted.
"""

from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .answer import Answer


MCQ = "mcq"
TRUE_FALSE = "true_false"

HEADERS: Dict[str, str] = {
    MCQ: "Multiple Choice Question",
    TRUE_FALSE: "True or False Question",
}

TRUE_FALSE_ANSWERS: Tuple[Answer, Answer] = (
    Answer(id=1, text="True"),
    Answer(id=2, text="False"),
)

MIN_CHOICES = 2
MAX_CHOICES = 10


class _QuestionFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    body: str = Field(min_length=1)
    mark: int = Field(ge=1)
    answers: Tuple[Answer, ...]
    correct_answer: Answer

    @field_validator("body")
    def _body_not_blank(cls, v: str) -> str:  # type: ignore[override]
        if not v.strip():
            raise ValueError("question body must not be blank")
        return v

    @model_validator(mode="after")
    def _correct_answer_listed(self):
        # Answers are picked by id in 1..len(answers).
        ids = [a.id for a in self.answers]
        if ids != list(range(1, len(ids) + 1)):
            raise ValueError(f"answer ids must run 1..{len(ids)} in order, got {ids}")
        if self.correct_answer not in self.answers:
            raise ValueError(f"correct answer {self.correct_answer.id} is not one of the question's answers")
        return self

    @property
    def header(self) -> str:
        return HEADERS[self.kind]  # type: ignore[attr-defined]

    def answer_by_id(self, answer_id: int) -> Answer:
        for a in self.answers:
            if a.id == answer_id:
                return a
        raise KeyError(f"Unknown answer id {answer_id} for question {self.body!r}")

    def display_lines(self) -> List[str]:
        return [str(self)] + [str(a) for a in self.answers]

    def __str__(self) -> str:
        return f"{self.header}\n{self.body} ({self.mark} Marks)"


class MCQQuestion(_QuestionFields):
    """Multiple choice question with 2 to 10 caller-defined answers."""

    kind: Literal["mcq"] = MCQ
    answers: Tuple[Answer, ...] = Field(min_length=MIN_CHOICES, max_length=MAX_CHOICES)


class TrueOrFalseQuestion(_QuestionFields):
    """Question with the fixed answer pair 1=True, 2=False.

    Any answers passed in are replaced by the fixed pair; ``correct_answer``
    may be an ``Answer`` or a bare id and is resolved against that pair.
    """

    kind: Literal["true_false"] = TRUE_FALSE
    answers: Tuple[Answer, ...] = TRUE_FALSE_ANSWERS

    @model_validator(mode="before")
    @classmethod
    def _fixed_answers(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["answers"] = TRUE_FALSE_ANSWERS
        correct = data.get("correct_answer")
        if isinstance(correct, Answer):
            correct_id = correct.id
        elif isinstance(correct, dict):
            correct_id = correct.get("id")
        else:
            correct_id = correct
        for a in TRUE_FALSE_ANSWERS:
            if a.id == correct_id:
                data["correct_answer"] = a
                break
        else:
            raise ValueError(f"true/false answer id must be 1 or 2, got {correct_id!r}")
        return data


Question = Annotated[Union[MCQQuestion, TrueOrFalseQuestion], Field(discriminator="kind")]

from typing import Any, Callable, Dict, Iterable, List


class ScriptedUI:
    """Feeds prepared input lines and records every prompt, message and error."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.errors: List[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("script exhausted")
        return self._lines.pop(0)

    def inform(self, msg: str) -> None:
        self.output.append(msg)

    def error(self, msg: str) -> None:
        self.errors.append(msg)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def callbacks(self) -> Dict[str, Callable[..., Any]]:
        return {"ask": self.ask, "inform": self.inform, "error": self.error}


# Math final exam: MCQ "2 + 2?" worth 10 (correct "4"), True/False worth 5 (correct True).
FINAL_SCRIPT = [
    "1",        # Final exam
    "30",       # minutes
    "2",        # questions
    "2", "2 + 2?", "10", "3", "2", "3", "4", "3",
    "1", "Sky is blue", "5", "1",
]

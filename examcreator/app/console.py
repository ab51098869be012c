from __future__ import annotations

"""Console UI callbacks for the session manager."""

from typing import Any, Callable, Dict

RED = "\033[31m"
RESET = "\033[0m"
CLEAR = "\033[2J\033[H"


def report_validation_error(message: str, *, color: bool = True) -> None:
    """Print a validation message; the next read continues on the same line."""
    if color:
        print(f"{RED}{message}{RESET}", end="", flush=True)
    else:
        print(message, end="", flush=True)


def build_ui(*, color_errors: bool, clear_screen: bool) -> Dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    def error(msg: str) -> None:
        report_validation_error(msg, color=color_errors)

    def clear() -> None:
        if clear_screen:
            print(CLEAR, end="", flush=True)

    return {
        "ask": ask,
        "inform": inform,
        "error": error,
        "clear": clear,
    }

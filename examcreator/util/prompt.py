from __future__ import annotations

"""Validated console input on top of the UI callbacks.

The UI dict carries ``ask`` (prompt -> line) and ``error`` (message -> None).
Bad input never escapes these helpers: the error is reported and the user
is asked again.
"""

from typing import Any, Callable, Dict, Optional, Tuple


def parse_bounded_int(raw: Optional[str], low: int, high: int) -> Optional[int]:
    """Return the integer in ``raw`` if it lies in ``low..high``, else None."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if value < low or value > high:
        return None
    return value


def ask_int(ui: Dict[str, Callable[..., Any]], prompt: str, bounds: Tuple[int, int]) -> int:
    low, high = bounds
    ask = ui["ask"]
    error = ui["error"]
    value = parse_bounded_int(ask(prompt), low, high)
    while value is None:
        error(f"Invalid input. Please enter a number between {low} and {high}: ")
        value = parse_bounded_int(ask(""), low, high)
    return value


def ask_text(ui: Dict[str, Callable[..., Any]], prompt: str) -> str:
    ask = ui["ask"]
    error = ui["error"]
    raw = ask(prompt)
    while raw is None or not raw.strip():
        error("Input cannot be empty. Please try again: ")
        raw = ask("")
    return raw

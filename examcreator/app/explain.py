from __future__ import annotations

"""Explain Mode: one trace line per session milestone.

Enabled with ``--explain``. Each line carries the milestone's position in the
session so authoring and administration can be followed end to end::

    [EXPLAIN] 3/question_added :: {"index":1,"kind":"mcq","mark":10}
"""

import json
from typing import Any, Dict

MILESTONES = (
    "subject_created",
    "exam_created",
    "question_added",
    "answer_recorded",
    "exam_graded",
)

_ENABLED = False
_seq = 0


def enable(flag: bool = True) -> None:
    global _ENABLED, _seq
    _ENABLED = bool(flag)
    _seq = 0


def enabled() -> bool:
    return _ENABLED


def format_line(seq: int, milestone: str, fields: Dict[str, Any]) -> str:
    return f"[EXPLAIN] {seq}/{milestone} :: {json.dumps(fields, separators=(',', ':'), default=str)}"


def trace(milestone: str, **fields: Any) -> None:
    if milestone not in MILESTONES:
        raise KeyError(f"Unknown milestone: {milestone}")
    if not _ENABLED:
        return
    global _seq
    _seq += 1
    print(format_line(_seq, milestone, fields))

from __future__ import annotations

"""Configuration loading and validation for Exam Creator.

This module loads YAML configuration, applies defaults, and validates
that the input bounds used by the authoring and subject prompts are sane.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import sys

import yaml

from ..model.question import MAX_CHOICES, MIN_CHOICES


# Hard limits each configurable bound must stay within.
HARD_BOUNDS: Dict[Tuple[str, str], Tuple[int, int]] = {
    ("subject", "id"): (1, 2147483647),
    ("exam", "duration_minutes"): (1, 24 * 60),
    ("exam", "questions"): (1, 500),
    ("question", "mark"): (1, 1000),
    ("question", "mcq_choices"): (MIN_CHOICES, MAX_CHOICES),
}

DEFAULT_BOUNDS: Dict[Tuple[str, str], Tuple[int, int]] = {
    ("subject", "id"): (1, 2147483647),
    ("exam", "duration_minutes"): (1, 180),
    ("exam", "questions"): (1, 50),
    ("question", "mark"): (1, 100),
    ("question", "mcq_choices"): (MIN_CHOICES, MAX_CHOICES),
}


@dataclass(frozen=True)
class Limits:
    """Inclusive (min, max) bounds for every bounded prompt."""

    subject_id: Tuple[int, int] = DEFAULT_BOUNDS[("subject", "id")]
    duration_minutes: Tuple[int, int] = DEFAULT_BOUNDS[("exam", "duration_minutes")]
    questions: Tuple[int, int] = DEFAULT_BOUNDS[("exam", "questions")]
    mark: Tuple[int, int] = DEFAULT_BOUNDS[("question", "mark")]
    mcq_choices: Tuple[int, int] = DEFAULT_BOUNDS[("question", "mcq_choices")]


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _check_bound(section: Dict[str, Any], section_name: str, key: str) -> None:
    lo_hard, hi_hard = HARD_BOUNDS[(section_name, key)]
    default = DEFAULT_BOUNDS[(section_name, key)]
    raw = section.get(key)
    lo = raw.get("min") if isinstance(raw, dict) else None
    hi = raw.get("max") if isinstance(raw, dict) else None
    # bool is an int subclass
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (lo, hi)):
        print(f"WARNING: Malformed bound '{section_name}.{key}', using {default[0]}..{default[1]}.")
        section[key] = {"min": default[0], "max": default[1]}
        return
    if lo > hi or lo < lo_hard or hi > hi_hard:
        print(
            f"WARNING: Bound '{section_name}.{key}' {lo}..{hi} outside {lo_hard}..{hi_hard}, "
            f"using {default[0]}..{default[1]}."
        )
        lo, hi = default
    section[key] = {"min": lo, "max": hi}


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Every bound must be a ``{min, max}`` mapping inside its hard limits;
    anything else falls back to the default with a warning.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing sections
    for name in ("subject", "exam", "question", "ui"):
        if not isinstance(cfg.get(name), dict):
            cfg[name] = {}

    for (section_name, key), (lo, hi) in DEFAULT_BOUNDS.items():
        section = cfg[section_name]
        section.setdefault(key, {"min": lo, "max": hi})
        _check_bound(section, section_name, key)

    ui = cfg["ui"]
    for key in ("color_errors", "clear_before_exam"):
        ui.setdefault(key, True)
        if not isinstance(ui[key], bool):
            print(f"WARNING: ui.{key} must be true or false, got {ui[key]!r}, using true.")
            ui[key] = True

    return cfg


def limits_from_config(cfg: Dict[str, Any]) -> Limits:
    """Build the prompt bounds from a validated config."""

    def pair(section: str, key: str) -> Tuple[int, int]:
        b = cfg[section][key]
        return (int(b["min"]), int(b["max"]))

    return Limits(
        subject_id=pair("subject", "id"),
        duration_minutes=pair("exam", "duration_minutes"),
        questions=pair("exam", "questions"),
        mark=pair("question", "mark"),
        mcq_choices=pair("question", "mcq_choices"),
    )

from __future__ import annotations

"""CLI entry point for Exam Creator."""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .app.console import build_ui
from .app.session_manager import SessionManager
from .config.config import limits_from_config, load_config, validate_config


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="examcreator", description="Author and take a console exam")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--explain", action="store_true", help="Print a trace line at each milestone")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"examcreator {__version__}")
        return 0

    if args.explain:
        from .app.explain import enable as explain_enable
        explain_enable(True)

    cfg = validate_config(load_config(args.config))
    ui_cfg = cfg["ui"]
    ui = build_ui(color_errors=ui_cfg["color_errors"], clear_screen=ui_cfg["clear_before_exam"])

    sm = SessionManager(limits_from_config(cfg), ui)
    try:
        sm.run()
    except (EOFError, KeyboardInterrupt):
        print("\nSession aborted.")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()

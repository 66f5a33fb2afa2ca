"""Punto de entrada: python -m fit_tracker."""

from __future__ import annotations

from fit_tracker.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

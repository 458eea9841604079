"""Module entry point allowing ``python -m trig_explorer``."""

from __future__ import annotations

from .app import main

if __name__ == "__main__":  # pragma: no cover
    main()

"""Build the trig_explorer executable with PyInstaller."""

from __future__ import annotations

import json
import os
from pathlib import Path
import re
import subprocess
import sys
from tempfile import TemporaryDirectory

BASE_DIR = Path(__file__).resolve().parent.parent
ENTRY_POINT = BASE_DIR / "src/trig_explorer/app.py"
APP_NAME = "trig_explorer"

_SAFE = re.compile(r"[^A-Za-z0-9.-]+")


def _safe_version(version: str) -> str:
    cleaned = _SAFE.sub("-", version).strip("-")
    return cleaned or "unknown"


def _detect_version() -> str:
    try:
        import setuptools_scm  # type: ignore[import-untyped]

        return str(
            setuptools_scm.get_version(root=BASE_DIR, fallback_version="0.1.0")
        )
    except (ImportError, LookupError) as exc:  # pragma: no cover - build helper
        print(f"Could not determine version: {exc}", file=sys.stderr)
        return "Unknown"


def build_command(version: str, version_json: Path) -> list[str]:
    """Return the PyInstaller command line embedding ``version_json``."""
    data_sep = ";" if os.name == "nt" else ":"
    return [
        "pyinstaller",
        "--noconsole",
        "--onefile",
        "--name",
        f"{APP_NAME}-v{_safe_version(version)}",
        "--clean",
        "--paths",
        str(BASE_DIR / "src"),
        "--add-data",
        f"{version_json}{data_sep}{APP_NAME}{os.sep}version.json",
        str(ENTRY_POINT),
    ]


def main() -> None:
    version = _detect_version()
    with TemporaryDirectory() as temp_dir:
        version_json = Path(temp_dir) / "version.json"
        version_json.write_text(
            json.dumps({"version": version}, indent=4), encoding="utf-8"
        )
        ret = subprocess.call(build_command(version, version_json), cwd=BASE_DIR)
    sys.exit(ret)


if __name__ == "__main__":
    main()

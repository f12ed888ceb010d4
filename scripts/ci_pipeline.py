#!/usr/bin/env python3
"""IBGrade CI helper: run every test suite and write `ci_report.json`."""

from __future__ import annotations

import json
import subprocess
import sys
import time
from datetime import datetime
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]

STEPS = [
    ("unit", [sys.executable, "-m", "pytest", "tests/unit", "-q"]),
    ("pytest", [sys.executable, "-m", "pytest", "tests/pytest", "-q"]),
    ("smoke", [sys.executable, "tests/smoke_test.py"]),
]


def run_step(name: str, argv: list[str], timeout: int = 300) -> dict:
    start = time.time()
    try:
        proc = subprocess.run(argv, cwd=REPO_ROOT, capture_output=True, text=True, timeout=timeout)
        success = proc.returncode == 0
        tail = (proc.stdout + proc.stderr).strip().splitlines()[-5:]
    except subprocess.TimeoutExpired:
        success = False
        tail = [f"timeout after {timeout}s"]

    duration = time.time() - start
    print(f"[{'OK' if success else 'FAIL'}] {name} ({duration:.2f}s)")
    if not success:
        print("\n".join(tail))
    return {"name": name, "success": success, "duration": round(duration, 3), "tail": tail}


def main() -> int:
    results = [run_step(name, argv) for name, argv in STEPS]
    failed = [r["name"] for r in results if not r["success"]]

    report = {"timestamp": datetime.now().isoformat(), "failed": failed, "results": results}
    (REPO_ROOT / "ci_report.json").write_text(json.dumps(report, indent=2), encoding="utf-8")

    print(f"[CI] {'FAILED: ' + ', '.join(failed) if failed else 'SUCCESS'}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

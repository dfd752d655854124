#!/usr/bin/env python
"""
Simple CI Tester for StepTree
=============================

Runs the checks CI runs, locally, before you push.

Usage:
    python scripts/test-ci.py
"""

import subprocess
import sys
from pathlib import Path


def run_command(cmd, description, critical=True):
    """Run a command and return True if it succeeds."""
    print(f"\n[Testing] {description}...")
    print(f"  Command: {cmd}")

    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
        return True
    if critical:
        print("  FAILED")
        if result.stderr:
            print(f"  Error: {result.stderr[:500]}")
    else:
        print("  WARNING - Non-critical issue")
    return False


def main():
    print("=" * 60)
    print("STEPTREE CI CHECKS")
    print("=" * 60)

    project_root = Path(__file__).parent.parent
    checks = [
        ('python -c "import steptree"', "Import package", True),
        (f'python "{project_root / "run_tests.py"}"', "Run test suite", True),
        ('flake8 steptree tests --count --select=E9,F63,F7,F82 --show-source',
         "Check for syntax errors (needs flake8)", False),
        ('python -m mypy steptree --ignore-missing-imports',
         "Type check (needs mypy)", False),
    ]

    all_passed = True
    for cmd, description, critical in checks:
        if not run_command(cmd, description, critical) and critical:
            all_passed = False

    print("\n" + "=" * 60)
    print("SUCCESS: all critical checks passed" if all_passed
          else "FAILURE: fix the issues above before pushing")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())

"""Shared pytest setup for StepTree tests."""

import sys
from pathlib import Path

# Add parent directory to path so tests run from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

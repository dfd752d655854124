#!/usr/bin/env python3
"""Basic usage of StepTree.

Walks an in-memory tree and a directory, showing the high-level API and
the Path recorded for every element.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from steptree import (
    FileSystemNavigator,
    MappingNavigator,
    PreorderWalker,
    WalkConfig,
    count_elements,
    print_tree,
)


ORG_CHART = {
    "CEO": ["CTO", "CFO"],
    "CTO": ["Platform", "Apps"],
    "Platform": ["Storage", "Network"],
    "CFO": ["Accounting"],
}


def demo_paths():
    """Show the Path of every element in preorder."""
    print("\n=== Paths ===")
    walker = PreorderWalker("CEO", MappingNavigator(ORG_CHART))
    for element in walker:
        path = walker.current_path()
        marker = "(last)" if path.is_last_sibling else ""
        print(f"{'  ' * path.depth}{element} #{path.index} {marker}")


def demo_tree():
    """Render the chart, then only its first two levels."""
    print("\n=== Tree ===")
    print_tree("CEO", MappingNavigator(ORG_CHART))
    print("\n=== Shallow tree ===")
    print_tree("CEO", MappingNavigator(ORG_CHART), WalkConfig.shallow(1))


def demo_filesystem(root: Path):
    """Count entries below a directory, skipping hidden ones."""
    print("\n=== Filesystem ===")
    navigator = FileSystemNavigator(include_hidden=False)
    print(f"{root}: {count_elements(root, navigator)} entries")


if __name__ == "__main__":
    demo_paths()
    demo_tree()
    demo_filesystem(Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent.parent)

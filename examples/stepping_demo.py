#!/usr/bin/env python3
"""Stepping through a tree by hand.

Demonstrates the walker controls the high-level API does not expose:
skipping a subtree, pausing at a breakpoint, resuming, and copying a
walker to traverse the same tree again independently.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from steptree import MappingNavigator, PreorderWalker, Processor, walk


TREE = {
    "R": ["P", "Q"],
    "P": ["X", "Y"],
    "Q": ["Z"],
}


def demo_skip():
    print("\n=== Skip ===")
    walker = PreorderWalker("R", MappingNavigator(TREE))
    for element in walker:
        print(f"visit {element}")
        if element == "P":
            print("  skipping P's children")
            walker.skip()


def demo_breakpoint():
    print("\n=== Breakpoint ===")
    walker = PreorderWalker("R", MappingNavigator(TREE))
    walker.next()
    walker.next()
    walker.add_breakpoint()
    print(f"breakpoint set below {walker.current_path()}")

    while True:
        element = walker.next()
        if element is not None:
            print(f"visit {element}")
            continue
        if not walker.is_paused():
            break
        print(f"paused at {walker.current_path()}, resuming")
        walker.resume()
        # the paused element is offered again; drop its subtree this time
        print(f"visit {walker.next()} (again)")
        walker.skip()


def demo_copy():
    print("\n=== Copy ===")
    walker = PreorderWalker("R", MappingNavigator(TREE))
    walker.next()
    walker.next()
    copied = walker.copy()
    print(f"original continues: {list(walker)}")
    print(f"copy starts over:   {list(copied)}")


class SizeProcessor(Processor):
    """Computes subtree sizes with pre/post hooks."""

    def __init__(self):
        self.sizes = {}
        self.stack = []

    def pre_process(self, element, path):
        self.stack.append(1)
        return True

    def post_process(self, element, path):
        size = self.stack.pop()
        self.sizes[element] = size
        if self.stack:
            self.stack[-1] += size


def demo_processor():
    print("\n=== Processor ===")
    processor = SizeProcessor()
    walk(PreorderWalker("R", MappingNavigator(TREE)), processor)
    for element, size in processor.sizes.items():
        print(f"{element}: {size}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    demo_skip()
    demo_breakpoint()
    demo_copy()
    demo_processor()

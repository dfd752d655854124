"""
Property checks for PreorderWalker over many generated trees.

Each tree is built from a fixed seed so failures are reproducible; the
walker is compared against a plain recursive traversal.
"""

import pytest

from steptree import PreorderWalker, ArraySequence
from steptree.testing import random_tree, recursive_preorder, recursive_paths, tree_navigator


SEEDS = list(range(25))


def produce(walker):
    elements, paths = [], []
    while True:
        element = walker.next()
        if element is None:
            return elements, paths
        elements.append(element)
        paths.append(walker.current_path())


def descendants(adjacency, element):
    result = []
    for child in adjacency.get(element, []):
        result.append(child)
        result.extend(descendants(adjacency, child))
    return result


@pytest.mark.parametrize("seed", SEEDS)
def test_matches_recursive_preorder(seed):
    tree = random_tree(seed)
    navigator = tree_navigator(tree)
    elements, _ = produce(PreorderWalker("n", navigator))
    assert elements == recursive_preorder("n", navigator)


@pytest.mark.parametrize("seed", SEEDS)
def test_paths_match_recursive_paths(seed):
    tree = random_tree(seed)
    navigator = tree_navigator(tree)
    _, paths = produce(PreorderWalker("n", navigator))
    assert paths == recursive_paths(["n"], navigator)


@pytest.mark.parametrize("seed", SEEDS[:10])
def test_multi_root_paths(seed):
    tree = random_tree(seed, max_depth=3)
    roots = tree.get("n", ["n"])
    navigator = tree_navigator(tree)
    _, paths = produce(PreorderWalker(ArraySequence(roots), navigator))
    assert paths == recursive_paths(roots, navigator)


@pytest.mark.parametrize("seed", SEEDS)
def test_path_depth_tracks_nesting(seed):
    # node names are "n.i.j...", one dot per level
    walker = PreorderWalker("n", tree_navigator(random_tree(seed)))
    for element in walker:
        path = walker.current_path()
        assert path.depth == element.count(".")
        assert path.elements()[-1] == element


@pytest.mark.parametrize("seed", SEEDS)
def test_reset_idempotence(seed):
    walker = PreorderWalker("n", tree_navigator(random_tree(seed)))
    first = produce(walker)
    walker.reset()
    assert produce(walker) == first
    walker.reset()
    assert produce(walker) == first


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("steps", [0, 1, 3, 7])
def test_copy_independence(seed, steps):
    walker = PreorderWalker("n", tree_navigator(random_tree(seed)))
    expected = produce(walker.copy())[0]

    walker.next()
    copied = walker.copy()
    for _ in range(steps):
        copied.next()
    # advancing the copy does not disturb the original
    assert produce(walker)[0] == expected[1:]
    assert produce(copied)[0] == expected[steps:]


@pytest.mark.parametrize("seed", SEEDS)
def test_skip_prunes_every_descendant(seed):
    tree = random_tree(seed)
    full = recursive_preorder("n", tree_navigator(tree))
    parents = [e for e in full if e in tree and e != "n"]
    if not parents:
        pytest.skip("tree has no inner node below the root")
    target = parents[len(parents) // 2]

    walker = PreorderWalker("n", tree_navigator(tree))
    produced = []
    for element in walker:
        produced.append(element)
        if element == target:
            walker.skip()

    pruned = set(descendants(tree, target))
    assert pruned
    assert not pruned & set(produced)
    assert produced == [e for e in full if e not in pruned]


@pytest.mark.parametrize("seed", SEEDS)
def test_breakpoint_resume_round_trip(seed):
    tree = random_tree(seed)
    full = recursive_preorder("n", tree_navigator(tree))
    target = full[len(full) // 2]

    walker = PreorderWalker("n", tree_navigator(tree))
    produced = []
    while True:
        element = walker.next()
        if element is None:
            if not walker.is_paused():
                break
            walker.resume()
            continue
        produced.append(element)
        if element == target and produced.count(target) == 1:
            walker.add_breakpoint()

    # the paused element and its subtree are produced twice
    subtree = [target] + descendants(tree, target)
    position = full.index(target)
    expected = full[:position + len(subtree)] + full[position:]
    assert produced == expected

from collections import deque

import pytest
from hypothesis import given, strategies as st

from bstdrill import analysis
from bstdrill.tree.bstree import BSTree, BSTreeNode

SAMPLE_KEYS = [3, 1, 4, 6, 9, 2, 5, 7]


def build(keys):
    tree = BSTree()
    for k in keys:
        tree.insert(k)
    return tree


def node(k, left=None, right=None):
    x = BSTreeNode(k, None)
    x.left = left
    x.right = right
    return x


def levels_by_breadth(tree):
    """Counts levels by walking the tree one level at a time."""
    if tree.is_empty():
        return 0
    count = 0
    level = deque([tree.root])
    while level:
        count += 1
        for _ in range(len(level)):
            x = level.popleft()
            for child in (x.left, x.right):
                if child is not tree.nil:
                    level.append(child)
    return count


def test_sum_keys():
    assert analysis.sum_keys(build(SAMPLE_KEYS)) == sum(SAMPLE_KEYS)
    assert analysis.sum_keys(BSTree()) == 0
    assert analysis.sum_keys(None) == 0
    assert analysis.sum_keys(node(4, node(1), node(6))) == 11


def test_sum_keys_accepts_subtree_root():
    tree = build(SAMPLE_KEYS)
    assert analysis.sum_keys(tree.find_node(6)) == 6 + 5 + 9 + 7


def test_height():
    assert analysis.height(BSTree()) == 0
    assert analysis.height(build([1])) == 1
    assert analysis.height(build([7, 4, 5, 9])) == 3
    assert analysis.height(build(SAMPLE_KEYS)) == 5


def test_height_of_degenerate_tree():
    tree = build(range(3000))
    assert analysis.height(tree) == 3000
    assert not analysis.is_balanced(tree)


@given(st.lists(st.integers(-100, 100)))
def test_height_matches_level_count(keys):
    tree = build(keys)
    assert analysis.height(tree) == levels_by_breadth(tree)


def test_inserted_trees_are_valid():
    assert analysis.is_valid_bst(build(SAMPLE_KEYS))
    assert analysis.is_valid_bst(build([5, 5, 3, 5, 8, 8]))
    assert analysis.is_valid_bst(BSTree())


def test_is_valid_bst_rejects_child_on_wrong_side():
    pine = node(10, node(5), node(15, node(20)))
    assert analysis.is_valid_bst(pine) is False


def test_is_valid_bst_checks_bounds_beyond_direct_children():
    # 12 is a fine right child of 5 but lies in the left subtree of 10
    root = node(10, node(5, right=node(12)), node(15))
    assert analysis.is_valid_bst(root) is False


def test_is_valid_bst_rejects_equal_key_on_the_left():
    assert analysis.is_valid_bst(node(5, node(5))) is False
    assert analysis.is_valid_bst(node(5, right=node(5))) is True


@given(st.lists(st.integers(-20, 20)))
def test_any_insertion_sequence_gives_valid_tree(keys):
    assert analysis.is_valid_bst(build(keys))


def test_kth_largest():
    tree = build(SAMPLE_KEYS)
    assert analysis.kth_largest(tree) == 6
    assert analysis.kth_largest(tree, k=1) == 9
    assert analysis.kth_largest(tree, k=8) == 1


def test_kth_largest_with_negative_keys():
    assert analysis.kth_largest(build([-5, -1, -3, -10])) == -5


def test_kth_largest_counts_duplicates():
    assert analysis.kth_largest(build([5, 5, 1]), k=2) == 5


def test_kth_largest_with_too_few_keys():
    assert analysis.kth_largest(build([1, 2])) is None
    assert analysis.kth_largest(BSTree()) is None


def test_kth_largest_rejects_non_positive_rank():
    with pytest.raises(ValueError):
        analysis.kth_largest(build(SAMPLE_KEYS), k=0)


@given(st.lists(st.integers(), min_size=1), st.integers(1, 10))
def test_kth_largest_agrees_with_sorting(keys, k):
    expected = sorted(keys, reverse=True)[k - 1] if k <= len(keys) else None
    assert analysis.kth_largest(build(keys), k) == expected


def test_is_balanced():
    assert analysis.is_balanced(BSTree())
    assert analysis.is_balanced(build([1]))
    assert analysis.is_balanced(build([2, 1, 3]))
    assert not analysis.is_balanced(build([3, 2, 1]))


def test_is_balanced_checks_every_level():
    # root subtrees have heights 3 and 4, but node 4 has only a left chain
    tree = build([8, 4, 2, 1, 12, 10, 14, 16, 18])
    assert not analysis.is_balanced(tree)
    assert analysis.is_balanced(tree.find_node(4)) is False
    assert analysis.is_balanced(tree.find_node(2)) is True
    assert analysis.is_balanced(tree.find_node(14)) is False


def test_same_bst_shape():
    assert analysis.same_bst_shape([3, 5, 4, 6, 1, 0, 2], [3, 1, 5, 2, 4, 6, 0])
    assert not analysis.same_bst_shape([1, 2, 3], [3, 2, 1])
    assert not analysis.same_bst_shape([1, 2], [1, 2, 3])
    assert analysis.same_bst_shape([], [])
    assert analysis.same_bst_shape([2, 2, 1], [2, 1, 2])


@given(st.lists(st.integers(0, 6), max_size=8).flatmap(
    lambda xs: st.tuples(st.just(xs), st.permutations(xs))))
def test_same_bst_shape_agrees_with_built_trees(pair):
    a, b = pair
    built_match = analysis.render_tree(build(a)) == analysis.render_tree(build(b))
    assert analysis.same_bst_shape(a, b) == built_match


def test_render_tree():
    root = node(1, node(2, right=node(4)), node(3))
    assert analysis.render_tree(root) == "\n".join(["1", "2 3", "· 4 · ·"])
    assert analysis.render_tree(BSTree()) == "<empty>"
    assert analysis.render_tree(build([2, 1, 3])) == "2\n1 3"


def test_render_tree_draws_nothing_below_missing_children():
    assert analysis.render_tree(build([1, 2, 3])) == "1\n· 2\n· 3"
    root = node(1, None, node(3, node(2)))
    assert analysis.render_tree(root) == "1\n· 3\n2 ·"


def test_render_tree_of_degenerate_tree_is_linear():
    rendered = analysis.render_tree(build(range(2000)))
    lines = rendered.splitlines()
    assert len(lines) == 2000
    assert lines[0] == "0"
    assert lines[-1] == "· 1999"

from . import log
from .tree.bstree import BSTree

PLACEHOLDER = "·"

def _present(x):
    return x is not None and not x.is_nil()

def _root(t):
    if isinstance(t, BSTree):
        t = t.root
    return t if _present(t) else None

def _nodes(t):
    """Yields every node of the subtree t in preorder."""
    root = _root(t)
    stack = [root] if root is not None else []
    while stack:
        x = stack.pop()
        yield x
        if _present(x.right):
            stack.append(x.right)
        if _present(x.left):
            stack.append(x.left)

def _postorder(t):
    root = _root(t)
    stack = [(root, False)] if root is not None else []
    while stack:
        x, expanded = stack.pop()
        if expanded:
            yield x
            continue
        stack.append((x, True))
        if _present(x.right):
            stack.append((x.right, False))
        if _present(x.left):
            stack.append((x.left, False))

def _heights(t):
    """Yields (node, left height, right height) for every node in postorder.

    Child heights are dropped once the parent has been visited, so memory
    use stays proportional to the height of the tree."""
    heights = {}
    for x in _postorder(t):
        lh = heights.pop(x.left, 0)
        rh = heights.pop(x.right, 0)
        heights[x] = 1 + max(lh, rh)
        yield x, lh, rh


def sum_keys(t):
    """Returns the sum of all keys in t. The empty tree sums to 0.

    Time complexity: O(n)"""
    return sum(x.key for x in _nodes(t))

def height(t):
    """Returns the number of levels in t. The empty tree has height 0.

    Time complexity: O(n)"""
    h = 0
    for _, lh, rh in _heights(t):
        h = 1 + max(lh, rh)
    return h

def is_balanced(t):
    """Checks that the heights of the two subtrees of every node in t differ
    by at most one.

    Time complexity: O(n)"""
    return all(abs(lh - rh) <= 1 for _, lh, rh in _heights(t))

def is_valid_bst(t):
    """Checks the search tree order of t.

    Every key in the left subtree of a node must be smaller than the node's
    key, every key in the right subtree must be greater or equal.

    Time complexity: O(n)"""
    root = _root(t)
    if root is None:
        return True
    # lower bound is inclusive, upper bound exclusive; None means unbounded
    stack = [(root, None, None)]
    while stack:
        x, low, high = stack.pop()
        if low is not None and x.key < low:
            return False
        if high is not None and not x.key < high:
            return False
        if _present(x.left):
            stack.append((x.left, low, x.key))
        if _present(x.right):
            stack.append((x.right, x.key, high))
    return True

def kth_largest(t, k=3):
    """Returns the k-th largest key in t, or None if t holds fewer than k
    keys. Equal keys are counted separately.

    Time complexity: O(n) for a fixed k (O(n * k) in general), O(k) space"""
    if k < 1:
        raise ValueError("k must be at least 1, got " + str(k))
    top = [None] * k
    for x in _nodes(t):
        for i in range(k):
            if top[i] is None or x.key > top[i]:
                top.insert(i, x.key)
                top.pop()
                break
    return top[k - 1]

def same_bst_shape(seq_a, seq_b):
    """Checks whether inserting the keys of seq_a and seq_b into two empty
    trees, in order, would produce trees of identical shape.

    No tree is built. Both sequences are split around their first key into
    the keys that would go left and right of it, keeping their order, and
    the parts are compared pairwise.

    Time complexity: O(n^2) worst case"""
    stack = [(list(seq_a), list(seq_b))]
    while stack:
        a, b = stack.pop()
        if len(a) != len(b):
            log.debug2("shape mismatch: ", a, " vs. ", b, " differ in size")
            return False
        if not a:
            continue
        pivot = a[0]
        if b[0] != pivot:
            log.debug2("shape mismatch: subtree root ", pivot, " vs. ", b[0])
            return False
        stack.append(([x for x in a[1:] if x < pivot],
                      [x for x in b[1:] if x < pivot]))
        stack.append(([x for x in a[1:] if not x < pivot],
                      [x for x in b[1:] if not x < pivot]))
    return True

def render_tree(t):
    """Renders t level by level, one line per level.

    Missing children of a node are drawn as PLACEHOLDER; nothing is drawn
    below a placeholder, so the output grows linearly with the tree.
    Output stops at the last level that still holds a node."""
    root = _root(t)
    if root is None:
        return "<empty>"
    lines = []
    level = [root]
    while True:
        lines.append(" ".join(PLACEHOLDER if x is None else str(x.key)
                              for x in level))
        below = []
        for x in level:
            if x is not None:
                below.append(x.left if _present(x.left) else None)
                below.append(x.right if _present(x.right) else None)
        if all(x is None for x in below):
            break
        level = below
    return "\n".join(lines)

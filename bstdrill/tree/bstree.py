import weakref

from .. import log
from ..exception import KeyNotFoundError

class BSTreeNode(object):
    """A node of an unbalanced binary search tree.

    The parent link is held as a weak reference: a node is owned by its
    parent's child slot (or by the tree's root slot), never by its children.
    """

    sentinel = False

    def __init__(self, k, v, nil=None):
        self.key =  k
        self.value = v

        self.left = nil
        self.right = nil
        self.parent = nil

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, p):
        self._parent = weakref.ref(p) if p is not None else None

    def is_nil(self):
        return self.sentinel

class BSTree(object):
    """An unbalanced binary search tree.

    Keys equal to an existing key are placed in its right subtree, so
    duplicates are kept as distinct nodes. Empty child slots and the root
    of an empty tree point to the shared sentinel node self.nil.
    """

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self.nil = self.node_type(k=None, v=None)
        self.nil.sentinel = True
        self.root = self.nil
        self.root.parent = self.nil
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, k):
        return self.contains(k)

    def __iter__(self):
        for x in self._inorder_nodes():
            yield (x.key, x.value)

    def is_empty(self):
        return self.root is self.nil

    def contains(self, k):
        return self.find_node(k) is not None

    def insert(self, k, v=None):
        """Insert a new node with key k and value v.

        Returns the new node.
        Time complexity: O(h)"""
        if k is None:
            raise ValueError("None is not a valid key")
        new = self.node_type(k=k, v=v, nil=self.nil)
        y = self.nil
        x = self.root
        while x is not self.nil:
            y = x
            if k < x.key:
                x = x.left
            else:
                x = x.right

        new.parent = y
        if y is self.nil:
            self.root = new
        elif k < y.key:
            y.left = new
        else:
            y.right = new
        self._size += 1
        log.debug2("inserted key ", k)
        return new

    def find_node(self, k):
        """Finds the node with key k. Returns None if k is not found.

        With duplicate keys the node closest to the root is returned.
        Time complexity: O(h)"""
        x = self.root
        while x is not self.nil and k != x.key:
            if k < x.key:
                x = x.left
            else:
                x = x.right
        return x if x is not self.nil else None

    def find(self, k):
        """Returns the value stored under key k.

        Raises KeyNotFoundError if k is not in the tree."""
        x = self.find_node(k)
        if x is None:
            raise KeyNotFoundError(k)
        return x.value

    def remove(self, k):
        """Removes one node with key k.

        Raises KeyNotFoundError if k is not in the tree.
        Time complexity: O(h)"""
        x = self.find_node(k)
        if x is None:
            raise KeyNotFoundError(k)
        self.delete(x)
        log.debug2("removed key ", k)

    def delete(self, node):
        """Delete node from the tree.

        A node with two children takes over the key and value of its
        successor, and the successor is unlinked in its place. The detached
        node carrying the deleted key and value is returned.
        Time complexity: O(h)"""
        if node.left is not self.nil and node.right is not self.nil:
            y = self.minimum(node.right)
            log.debug3("replacing key ", node.key, " with successor ", y.key)
            node.key, y.key = y.key, node.key
            node.value, y.value = y.value, node.value
            node = y

        if node.left is not self.nil:
            child = node.left
        else:
            child = node.right
        if node.parent is self.nil:
            log.debug3("root removed, new root: ",
                       child.key if child is not self.nil else "<empty>")
        self._transplant(node, child)

        node.left = self.nil
        node.right = self.nil
        node.parent = None
        self._size -= 1
        return node

    def _transplant(self, old, new):
        """Replace subtree rooted at node old with the subtree rooted at node new

        Time complexity: O(1)"""
        if old.parent is self.nil:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def keys(self):
        return [x.key for x in self._inorder_nodes()]

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        for x in self._inorder_nodes():
            f(x)

    def _inorder_nodes(self):
        stack = []
        x = self.root
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
            else:
                x = stack.pop()
                yield x
                x = x.right

    def minimum(self, x=None):
        """Finds the node with the minimal key

        Returns None if tree is empty
        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum key

        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.right is not self.nil:
            x = x.right
        return x

    def successor(self, x):
        """Finds the successor of node x in sorted order

        Time complexity: O(h)"""
        if x.right is not self.nil:
            return self.minimum(x.right)
        y = x.parent
        while y is not None and y is not self.nil and x is y.right:
            x = y
            y = y.parent
        return y if y is not None and y is not self.nil else None

    def predecessor(self, x):
        """Finds the predecessor of node x in sorted order

        Time complexity: O(h)"""
        if x.left is not self.nil:
            return self.maximum(x.left)
        y = x.parent
        while y is not None and y is not self.nil and x is y.left:
            x = y
            y = y.parent
        return y if y is not None and y is not self.nil else None

from .. import log
from ..exception import EmptyInputError


class BSTree(object):
    """A binary search tree node.

    Every node is also the root of its own subtree, so all operations work
    relative to the node they are called on. Smaller values go to the left,
    greater or equal values to the right (duplicates are allowed).

    The tree does not balance itself. Insert values in randomized order to
    keep its height low; sorted input produces a linked list.
    """

    def __init__(self, value):
        self.value = value

        self.parent = None
        self.left = None
        self.right = None

    @classmethod
    def from_sequence(cls, values):
        """Builds a tree from values, using the first one as the root.

        Raises EmptyInputError if values is empty.
        Time complexity: O(n*h)"""
        it = iter(values)
        try:
            first = next(it)
        except StopIteration:
            raise EmptyInputError("cannot build a tree from an empty sequence")
        tree = cls(first)
        n = 1
        for v in it:
            tree.insert(v)
            n += 1
        log.debug2("built tree from ", n, " values")
        return tree

    def is_root(self):
        return self.parent is None

    def is_leaf(self):
        return self.left is None and self.right is None

    def is_left_child(self):
        return self.parent is not None and self.parent.left is self

    def is_right_child(self):
        return self.parent is not None and self.parent.right is self

    def has_left_child(self):
        return self.left is not None

    def has_right_child(self):
        return self.right is not None

    def has_any_child(self):
        return self.has_left_child() or self.has_right_child()

    def has_both_children(self):
        return self.has_left_child() and self.has_right_child()

    def size(self):
        """Number of nodes in this subtree.

        Time complexity: O(n)"""
        return sum(1 for _ in self._preorder_nodes())

    def root(self):
        x = self
        while x.parent is not None:
            x = x.parent
        return x

    def insert(self, value):
        """Inserts value below this node and returns the new leaf.

        Only insert at the root, otherwise the ordering is just kept within
        this subtree.
        Time complexity: O(h)"""
        x = self
        while True:
            if value < x.value:
                if x.left is None:
                    x.left = self.__class__(value)
                    x.left.parent = x
                    new = x.left
                    break
                x = x.left
            else:
                if x.right is None:
                    x.right = self.__class__(value)
                    x.right.parent = x
                    new = x.right
                    break
                x = x.right
        log.debug3("inserted ", value)
        return new

    def remove(self):
        """Removes this node from the tree.

        Returns the node that took its place, or None if this was a leaf.
        When the root is removed the returned node is the new root.
        Time complexity: O(h)"""
        # every replacement is itself removed first, which picks its own
        # replacement below it; splice the chain back from the bottom up
        chain = [self]
        replacement = self._replacement()
        while replacement is not None:
            chain.append(replacement)
            replacement = replacement._replacement()

        replacement = None
        for node in reversed(chain):
            node._splice(replacement)
            replacement = node
        return chain[1] if len(chain) > 1 else None

    def _replacement(self):
        if self.right is not None:
            return self.right.minimum()
        elif self.left is not None:
            return self.left.maximum()
        return None

    def _splice(self, replacement):
        """Puts replacement (already detached) in the place of this node."""
        if replacement is not None:
            replacement.right = self.right
            replacement.left = self.left
            if self.right is not None:
                self.right.parent = replacement
            if self.left is not None:
                self.left.parent = replacement
        self._reconnect_parent_to(replacement)

        log.debug3("removed ", self.value)
        self.parent = None
        self.left = None
        self.right = None

    def _reconnect_parent_to(self, node):
        if self.parent is not None:
            if self.is_left_child():
                self.parent.left = node
            else:
                self.parent.right = node
        if node is not None:
            node.parent = self.parent

    def search(self, value):
        """Finds the highest node holding value. Returns None if not found.

        Time complexity: O(h)"""
        x = self
        while x is not None:
            if value < x.value:
                x = x.left
            elif value > x.value:
                x = x.right
            else:
                return x
        return None

    def contains(self, value):
        return self.search(value) is not None

    def __contains__(self, value):
        return self.contains(value)

    def minimum(self):
        """Returns the leftmost node of this subtree.

        Time complexity: O(h)"""
        x = self
        while x.left is not None:
            x = x.left
        return x

    def maximum(self):
        """Returns the rightmost node of this subtree.

        Time complexity: O(h)"""
        x = self
        while x.right is not None:
            x = x.right
        return x

    def depth(self):
        """Distance (in edges) from this node to the root.

        Time complexity: O(h)"""
        x = self
        edges = 0
        while x.parent is not None:
            x = x.parent
            edges += 1
        return edges

    def height(self):
        """Distance (in edges) from this node to its deepest leaf.

        Time complexity: O(n)"""
        h = 0
        stack = [(self, 0)]
        while stack:
            x, d = stack.pop()
            if d > h:
                h = d
            if x.left is not None:
                stack.append((x.left, d + 1))
            if x.right is not None:
                stack.append((x.right, d + 1))
        return h

    def predecessor(self):
        """Finds the node preceding this one in sorted order.

        Time complexity: O(h)"""
        if self.left is not None:
            return self.left.maximum()
        y = self.parent
        while y is not None:
            if y.value < self.value:
                return y
            y = y.parent
        return None

    def successor(self):
        """Finds the node following this one in sorted order.

        Time complexity: O(h)"""
        if self.right is not None:
            return self.right.minimum()
        y = self.parent
        while y is not None:
            if y.value > self.value:
                return y
            y = y.parent
        return None

    def _inorder_nodes(self):
        stack = []
        x = self
        while stack or x is not None:
            while x is not None:
                stack.append(x)
                x = x.left
            x = stack.pop()
            yield x
            x = x.right

    def _preorder_nodes(self):
        stack = [self]
        while stack:
            x = stack.pop()
            yield x
            if x.right is not None:
                stack.append(x.right)
            if x.left is not None:
                stack.append(x.left)

    def _postorder_nodes(self):
        # reversed (node, right, left) preorder
        out = []
        stack = [self]
        while stack:
            x = stack.pop()
            out.append(x)
            if x.left is not None:
                stack.append(x.left)
            if x.right is not None:
                stack.append(x.right)
        return reversed(out)

    def traverse_inorder(self, f):
        """Calls f(v) for every value v in sorted order.

        Time complexity: O(n)
        """
        for x in self._inorder_nodes():
            f(x.value)

    def traverse_preorder(self, f):
        for x in self._preorder_nodes():
            f(x.value)

    def traverse_postorder(self, f):
        for x in self._postorder_nodes():
            f(x.value)

    def map(self, f):
        """Returns [f(v) for every value v] in sorted order."""
        return [f(x.value) for x in self._inorder_nodes()]

    def to_list(self):
        return self.map(lambda v: v)

    def __iter__(self):
        return (x.value for x in self._inorder_nodes())

    def is_bst(self, min_value=None, max_value=None):
        """Checks the ordering of this subtree.

        Every value has to lie within [min_value, max_value]; None means the
        bound is open.
        Time complexity: O(n)"""
        stack = [(self, min_value, max_value)]
        while stack:
            x, lo, hi = stack.pop()
            if lo is not None and x.value < lo:
                return False
            if hi is not None and x.value > hi:
                return False
            if x.left is not None:
                stack.append((x.left, lo, x.value))
            if x.right is not None:
                stack.append((x.right, x.value, hi))
        return True

    def describe(self):
        """Renders the subtree as "(left) <- value -> (right)"."""
        s = []
        # pending items are nodes or already rendered text, in reverse order
        stack = [self]
        while stack:
            item = stack.pop()
            if not isinstance(item, BSTree):
                s.append(item)
                continue
            if item.right is not None:
                stack.extend((")", item.right, " -> ("))
            stack.append(str(item.value))
            if item.left is not None:
                stack.extend((") <- ", item.left, "("))
        return ''.join(s)

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return "BSTree({!r})".format(self.value)

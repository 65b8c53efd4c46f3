from hypothesis import given, strategies as st

from obtree.tree.bstree import BSTree

values_lists = st.lists(st.integers(min_value=-50, max_value=50), min_size=1,
                        max_size=60)


def all_nodes(tree):
    nodes = []
    stack = [tree]
    while stack:
        n = stack.pop()
        nodes.append(n)
        if n.left is not None:
            stack.append(n.left)
        if n.right is not None:
            stack.append(n.right)
    return nodes


def check_invariants(tree):
    assert tree.parent is None
    assert tree.is_bst()
    for n in all_nodes(tree):
        if n.left is not None:
            assert n.left.parent is n
            assert n.left.value < n.value
        if n.right is not None:
            assert n.right.parent is n
            assert n.right.value >= n.value
        assert n.root() is tree


@given(values_lists)
def test_insert_keeps_invariants(xs):
    tree = BSTree(xs[0])
    check_invariants(tree)
    for i, x in enumerate(xs[1:], 2):
        tree.insert(x)
        check_invariants(tree)
        assert tree.size() == i
        assert tree.contains(x)


@given(values_lists)
def test_inorder_is_sorted(xs):
    tree = BSTree.from_sequence(xs)
    values = []
    tree.traverse_inorder(values.append)
    assert values == sorted(xs)
    assert tree.minimum().value == values[0]
    assert tree.maximum().value == values[-1]


@given(values_lists, values_lists)
def test_size_conservation(xs, more):
    tree = BSTree.from_sequence(xs)
    for x in more:
        tree.insert(x)
    assert tree.size() == len(xs) + len(more)


@given(values_lists)
def test_height_bounds(xs):
    tree = BSTree.from_sequence(xs)
    n = tree.size()
    assert n.bit_length() - 1 <= tree.height() <= n - 1
    for node in all_nodes(tree):
        assert node.depth() <= tree.height()


@given(values_lists, st.data())
def test_remove_keeps_invariants(xs, data):
    root = BSTree.from_sequence(xs)
    remaining = sorted(xs)
    while root is not None:
        nodes = all_nodes(root)
        node = data.draw(st.sampled_from(nodes))
        n = root.size()
        replacement = node.remove()
        remaining.remove(node.value)
        if node is root:
            root = replacement
        assert node.parent is None
        assert node.left is None
        assert node.right is None
        if root is not None:
            check_invariants(root)
            assert root.size() == n - 1
            assert root.to_list() == remaining
    assert remaining == []


@given(st.lists(st.integers(), min_size=1, max_size=40, unique=True))
def test_neighbours_match_sorted_order(xs):
    tree = BSTree.from_sequence(xs)
    ordered = sorted(xs)
    for i, v in enumerate(ordered):
        node = tree.search(v)
        pred = node.predecessor()
        succ = node.successor()
        if i == 0:
            assert pred is None
        else:
            assert pred.value == ordered[i - 1]
        if i == len(ordered) - 1:
            assert succ is None
        else:
            assert succ.value == ordered[i + 1]

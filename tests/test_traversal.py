from types import SimpleNamespace

import pytest

from iavlkit.traversal import Iterator, IteratorError, Traversal, TraversableNode


def build_tree():
    a = TraversableNode(key=b"a", value=b"\x01", version=1)
    b = TraversableNode(key=b"b", value=b"\x02", version=3)
    bi = TraversableNode(key=b"b", version=3, subtree_height=1, size=2, hash=b"\x0b", left=a, right=b)
    c = TraversableNode(key=b"c", value=b"\x03", version=3)
    ci = TraversableNode(key=b"c", version=3, subtree_height=2, size=3, hash=b"\x0c", left=bi, right=c)
    d = TraversableNode(key=b"d", value=b"\x04", version=2)
    e = TraversableNode(key=b"e", value=b"\x05", version=3)
    ei = TraversableNode(key=b"e", version=3, subtree_height=1, size=2, hash=b"\x0e", left=d, right=e)
    root = TraversableNode(key=b"d", version=3, subtree_height=3, size=5, hash=b"\x0d", left=ci, right=ei)
    return root


def leaf_keys(nodes):
    return [n.key for n in nodes if n.subtree_height == 0]


KEYS = [b"a", b"b", b"c", b"d", b"e"]


def test_full_ascending_yields_sorted_leaves():
    assert leaf_keys(Traversal(build_tree())) == KEYS


def test_full_descending_yields_reverse_leaves():
    assert leaf_keys(Traversal(build_tree(), None, None, False)) == list(reversed(KEYS))


def test_range_is_end_exclusive():
    assert leaf_keys(Traversal(build_tree(), b"b", b"d", True)) == [b"b", b"c"]


def test_range_inclusive_end():
    nodes = Traversal(build_tree(), b"b", b"d", True, True)
    assert leaf_keys(nodes) == [b"b", b"c", b"d"]


def test_preorder_parents_before_children():
    root = build_tree()
    nodes = list(Traversal(root))
    assert nodes[0] is root
    positions = {id(n): i for i, n in enumerate(nodes)}
    assert len(nodes) == 9
    for n in nodes:
        if n.subtree_height > 0:
            assert positions[id(n)] < positions[id(n.left)]
            assert positions[id(n)] < positions[id(n.right)]


def test_postorder_children_before_parents():
    root = build_tree()
    nodes = list(Traversal(root, post=True))
    assert nodes[-1] is root
    positions = {id(n): i for i, n in enumerate(nodes)}
    for n in nodes:
        if n.subtree_height > 0:
            assert positions[id(n)] > positions[id(n.left)]
            assert positions[id(n)] > positions[id(n.right)]


def test_empty_root_traversal_is_empty():
    assert list(Traversal(None)) == []


def test_iterator_walks_pairs():
    tree = SimpleNamespace(root=build_tree())
    itr = Iterator(None, None, True, tree)
    assert itr.valid()
    assert itr.key() == b"a"
    assert itr.value() == b"\x01"
    assert list(itr) == [(b"a", b"\x01"), (b"b", b"\x02"), (b"c", b"\x03"), (b"d", b"\x04"), (b"e", b"\x05")]
    assert not itr.valid()
    assert itr.error() is None


def test_iterator_ranged_descending():
    tree = SimpleNamespace(root=build_tree())
    itr = Iterator(b"b", b"e", False, tree)
    assert itr.domain() == (b"b", b"e")
    assert [k for k, _ in itr] == [b"d", b"c", b"b"]


def test_iterator_empty_range_is_invalid():
    tree = SimpleNamespace(root=build_tree())
    itr = Iterator(b"a", b"a", True, tree)
    assert not itr.valid()


def test_iterator_on_empty_tree_is_invalid():
    itr = Iterator(None, None, True, SimpleNamespace(root=None))
    assert not itr.valid()
    assert itr.key() is None


def test_iterator_nil_tree_reports_error():
    itr = Iterator(b"a", b"c", True, None)
    assert not itr.valid()
    assert itr.domain() == (b"a", b"c")
    assert isinstance(itr.error(), IteratorError)
    with pytest.raises(IteratorError):
        itr.close()


def test_iterator_close_invalidates():
    itr = Iterator(None, None, True, SimpleNamespace(root=build_tree()))
    itr.close()
    assert not itr.valid()
    itr.next()
    assert not itr.valid()
    assert itr.is_fast() is False
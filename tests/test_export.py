from types import SimpleNamespace

import pytest

from iavlkit.export import ExportDoneError, ExportNode, Exporter, NotInitializedTreeError
from iavlkit.traversal import TraversableNode


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
    return SimpleNamespace(root=root, version=3)


EXPECTED = [
    ExportNode(key=b"a", value=bytes([1]), version=1, height=0),
    ExportNode(key=b"b", value=bytes([2]), version=3, height=0),
    ExportNode(key=b"b", value=None, version=3, height=1),
    ExportNode(key=b"c", value=bytes([3]), version=3, height=0),
    ExportNode(key=b"c", value=None, version=3, height=2),
    ExportNode(key=b"d", value=bytes([4]), version=2, height=0),
    ExportNode(key=b"e", value=bytes([5]), version=3, height=0),
    ExportNode(key=b"e", value=None, version=3, height=1),
    ExportNode(key=b"d", value=None, version=3, height=3),
]


def test_exporter_order_matches_post_order():
    actual = []
    exporter = Exporter(build_tree())
    while True:
        try:
            actual.append(exporter.next())
        except ExportDoneError:
            break
    exporter.close()
    assert actual == EXPECTED


def test_exporter_iteration_protocol():
    with Exporter(build_tree()) as exporter:
        assert list(exporter) == EXPECTED


def test_exporter_done_repeats():
    exporter = Exporter(build_tree())
    list(exporter)
    with pytest.raises(ExportDoneError):
        exporter.next()
    with pytest.raises(ExportDoneError):
        exporter.next()


def test_exporter_close_stops_export():
    exporter = Exporter(build_tree())
    first = exporter.next()
    assert first == EXPECTED[0]
    exporter.close()
    with pytest.raises(ExportDoneError):
        exporter.next()
    exporter.close()
    exporter.close()
    with pytest.raises(ExportDoneError):
        exporter.next()


def test_exporter_empty_tree():
    exporter = Exporter(SimpleNamespace(root=None, version=0))
    assert list(exporter) == []


def test_exporter_nil_tree():
    with pytest.raises(NotInitializedTreeError):
        Exporter(None)


def test_exporter_tree_without_root():
    with pytest.raises(NotInitializedTreeError):
        Exporter(object())


def test_export_done_message():
    assert str(ExportDoneError()) == "export is complete"
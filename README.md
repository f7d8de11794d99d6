# iavlkit

Building blocks for working with versioned, immutable AVL+ trees that store
key/value pairs. The package has no third-party dependencies.

## Modules

- `iavlkit.encoding`: unsigned varints, zig-zag signed varints and
  length-prefixed byte strings. It has encoders (`encode_uvarint`,
  `encode_varint`, `encode_bytes`), size helpers (`encode_uvarint_size`,
  `encode_varint_size`, `encode_bytes_size`) and decoders (`decode_uvarint`,
  `decode_varint`, `decode_bytes`). Each decoder returns the value and the
  number of input bytes read. It raises `DecodeError` on truncated or malformed
  input, and the error's `consumed` attribute gives the bytes read.
- `iavlkit.hexbytes`: `HexBytes` is a `bytes` subclass whose `str()` is
  upper-case hex. `to_json()` returns a quoted hex string and
  `HexBytes.from_json()` parses one. `bytes_to_str` and `str_to_bytes` convert
  between bytes and str without losing any byte values.
- `iavlkit.cache`: `LRUCache(max_element_count)` is a least-recently-used
  cache of objects that have a `key` attribute. `add` returns the node it
  replaced or the oldest node it evicted, otherwise `None`. `get` marks an
  entry as recently used. `has` and `in` do not.
- `iavlkit.fastnode`: `FastNode` holds a key, its value and the version at
  which it was last updated. It has `to_bytes`, `write_bytes`, `encoded_size`
  and `FastNode.deserialize(key, buf)`.
- `iavlkit.keyformat`: `KeyFormat(prefix, *widths)` is a sortable key layout
  made of a prefix byte followed by fixed-width big-endian segments. Only the
  last segment may have width 0, which makes it unbounded.
- `iavlkit.rand`: `Rand` is a lock-guarded pseudo-random generator. It is
  seeded from the operating system unless you give it a seed. There are also
  module-level helpers: `seed`, `rand_str`, `rand_int`, `rand_int31`,
  `rand_bytes` and `rand_perm`. It is not for cryptography.
- `iavlkit.traversal`: `TraversableNode` is an in-memory tree node.
  `Traversal` walks a subtree lazily, in pre-order or post-order, ascending or
  descending, within a key range. `Iterator` walks the leaves within
  `[start, end)` of any object that has a `root` attribute.
- `iavlkit.export`: `Exporter` yields `ExportNode` records in depth-first
  post-order. `next()` raises `ExportDoneError` when the export is finished.
  Iterating over the exporter stops cleanly instead. It can be used as a
  context manager.
- `iavlkit.render`: `render_shape` returns the nested shape of a tree as
  lines of text. `default_node_encoder` describes a single node.
  `format_leaves` builds a `Tree{key: value, ...}` listing.
- `iavlkit.viewer`: helpers for printing keys (`encode_id`,
  `parse_weave_key`), for describing shape nodes (`node_encoder`) and for
  listing versions (`format_versions`).
- `iavlkit.stats`: `Stats` counts nodes, leaves, approximate size and elapsed
  time for an export or import run.
- `iavlkit.logger`: `debug` writes %-formatted output only after
  `set_debugging(True)` has been called.

## Examples

```python
from iavlkit.encoding import encode_uvarint, encode_bytes, decode_bytes

encode_uvarint(300)            # b'\xac\x02'
decode_bytes(encode_bytes(b"abc"))  # (b'abc', 4)
```

```python
from iavlkit.keyformat import KeyFormat

kf = KeyFormat(b"e", 8, 8)
key = kf.key(100, 200)         # b'e' followed by two 8-byte big-endian integers
kf.scan(key, int, int)         # (100, 200)
```

```python
from iavlkit.fastnode import FastNode

FastNode(key=b"k", version_last_updated_at=1, value=b"\x02").to_bytes()  # b'\x02\x01\x02'
```

Walking, exporting and rendering a small tree:

```python
from types import SimpleNamespace

from iavlkit.export import Exporter
from iavlkit.render import format_leaves, render_shape
from iavlkit.traversal import Iterator, TraversableNode

a = TraversableNode(key=b"a", value=b"\x01", version=1)
b = TraversableNode(key=b"b", value=b"\x02", version=1)
root = TraversableNode(key=b"b", version=1, subtree_height=1, size=2,
                       hash=b"\x01\x02", left=a, right=b)
tree = SimpleNamespace(root=root)

pairs = list(Iterator(None, None, True, tree))  # [(b'a', b'\x01'), (b'b', b'\x02')]
format_leaves(pairs)                            # 'Tree{61: 01, 62: 02}'
render_shape(root, "  ")                        # ['  * 61', '- 0102', '  * 62']

with Exporter(tree) as exporter:
    heights = [node.height for node in exporter]  # [0, 0, 1]
```

## What the package does not do

There is no mutable tree in the package. You cannot insert, remove, hash,
save or load versions with it. There is no database or node storage, and
there is no importer to rebuild a tree from exported nodes. There are no
proofs and no command-line program. Trees are built by hand from
`TraversableNode` objects, as in the example above. `Exporter` and `Iterator`
work on any object with a `root` attribute, and they read only the in-memory
nodes.
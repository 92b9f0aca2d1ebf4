# extsearch

Tools for experimenting with search methods over files of fixed-size records:

- **Indexed sequential search**: the data file is split into pages of 1000
  records. A small index holds the first key of each page, with at most 1000
  pages. A lookup reads only the one page that can hold the key.
- **Binary search tree on disk**: records are stored in a file where each
  record carries the record positions of its left and right children. `-1`
  means that there is no child.
- **B-tree in memory**: keys are loaded into a B-tree of configurable order
  and searched there. A page holds between `order` and `2 * order` keys, and
  the default order is 5.

Every record has the same little-endian binary layout:

- a 64-bit key
- a 64-bit data field
- two NUL-padded UTF-8 text fields of 1000 and 5000 bytes
- two 64-bit child links

## Installation

```
pip install .
```

## Interactive menu

```
extsearch [--data-file PATH] [--tree-file PATH] [--records N] [--key K]
```

| Option | Meaning | Default |
| --- | --- | --- |
| `--data-file` | The common data file. | `dados.bin` |
| `--tree-file` | The binary tree file. | `filebinarytree.bin` |
| `--records` | How many records option 1 writes. | 1000000 |
| `--key` | The key that option 4 looks up. | 91299 |

The menu, in Portuguese, offers:

1. Generate the common data file. Its keys run from 0 upwards and its data
   fields hold random values.
2. Build the binary tree file from the common file.
   - Duplicate keys are counted and skipped.
   - Progress is printed every 10 records.
3. Load the keys of the common file into a B-tree. Then report whether each
   of these keys is present: 91299, 123456, 999999, 1, 500000 and 750000.
4. Run an indexed sequential search for `--key` on the common file.
0. Quit.

The menu also ends when standard input reaches end of file.

The common file's keys are in ascending order. Because of that, the binary
tree built from it by option 2 is a single chain, and every insertion walks
the whole chain. With a large `--records` this takes a very long time.

## Library use

```python
import random
from extsearch.generator import generate_file
from extsearch.sequential_search import build_page_index, indexed_search
from extsearch.btree import BTree

generate_file(5000, "data.bin", random.Random(1))

with open("data.bin", "rb") as stream:
    index = build_page_index(stream)
    record = indexed_search(index, 4321, stream)
    print(record.key if record else "not found")

tree = BTree(2)
for key in (10, 3, 7, 1):
    tree.insert(key)          # returns False for a key already present
print(7 in tree, list(tree))  # True [1, 3, 7, 10]
print(tree.format())          # "1 3 7 10 "
```

### Modules

`extsearch.record`
: Provides `Record`, with `pack()` and `Record.unpack(data)`. It also
  provides `read_records(stream)`, which yields every complete record from an
  open binary file.

`extsearch.generator`
: Provides `generate_file(num_lines, path, rng=None)`.

`extsearch.binary_tree_file`
: Provides the following:
  - `create_binary_tree_file(path)` creates or truncates the file.
  - `insert_into_tree(record, stream)` returns `False` on a duplicate key. The
    stream must be open for reading and writing.
  - `search_tree(key, stream)` returns the record or `None`.

`extsearch.sequential_search`
: Provides the following:
  - `build_page_index(stream)` raises `ValueError` beyond 1000 pages.
  - `indexed_search(index, key, stream)` returns the record or `None`.

`extsearch.cli`
: Provides `main(argv=None)`, the interactive menu.

## Limitations

The B-tree lives in memory only. It is built anew from the common file each
time and is never written to disk.

The interactive menu searches the binary tree file and the B-tree only
through the fixed steps listed above.

## Running the tests

```
pip install .[test]
pytest
```
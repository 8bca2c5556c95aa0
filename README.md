# toolbench

A collection of small, self-contained tools and data structures:

- **Sandpile** – an abelian sandpile simulator that writes snapshots as 4-bit BMP images.
- **Binary search tree and tree container** – a tree with pre-, in- and post-order walks, and a container with a cursor that steps forwards and backwards.
- **Task scheduler** – lazily evaluated tasks whose arguments may be results of other tasks.
- **Search index** – a word-position index over a directory and a ranked finder that takes `AND`/`OR` queries.

The package depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Sandpile

Read a file of whitespace-separated `x y grains` triples, topple the pile and
write BMP snapshots:

```
toolbench-sandpile -i grains.txt -o out/pile -m 10000 -f 100
```

Long forms are also accepted: `--input=`, `--output=`, `--max-iter=`, `--freq=`.

- `-i` / `--input=` names the grains file; `-o` / `--output=` is the prefix of
  the image files, which are written as `<prefix><number>.bmp`. Both are required.
- `-m` / `--max-iter=` bounds the number of toppling steps; `0` (the default)
  means no limit.
- `-f` / `--freq=` writes a snapshot every that many steps; `0` (the default)
  writes none.

One step always runs. When the run ends, the final pile is written under the
number of the last snapshot (`<prefix>0.bmp` if none was taken). Unknown
arguments are ignored. Errors are reported on standard error with exit status 1.

### Search index

Build an index of every file under a directory:

```
toolbench-index path/to/texts path/to/index
```

The index directory holds a `words_numbers` file with the word count of each
file, and one file per word listing `file line position` for every occurrence.
Running it again appends to an existing index.

Search it, writing ranked results with line and word positions to a file:

```
toolbench-find path/to/index results.txt bridge AND town OR father
```

Queries combine words with `AND` and `OR`, which bind equally and group from
the left. Parentheses group sub-queries and are written attached to the
words, as in `(bridge AND town) OR (father AND escape)`. Files are scored by
TF-IDF: `OR` adds the scores of its sides and `AND` takes the smaller one.
Files scoring zero are left out; the rest are listed highest first, each
followed by the one-based line and word positions of every query word.

## Library use

### Sandpile

```python
from toolbench.sandpile import Sandpile

pile = Sandpile.from_grains([(0, 0, 16)])
while not pile.is_stable():
    pile.step()
pile.total  # 16
```

`toolbench.sandpile.simulate` runs a whole simulation from a
`toolbench.sandpile_options.SandpileOptions` (see also `parse_args`), calling
an optional callback for each snapshot. `toolbench.sandpile_image.encode_bmp`
returns the image bytes for a pile and `write_bmp` writes a numbered file
after a prefix.

### Trees

```python
from toolbench.bst import BinarySearchTree

tree = BinarySearchTree([8, 3, 1, 6, 4, 7, 10, 14, 13])

list(tree.inorder())    # [1, 3, 4, 6, 7, 8, 10, 13, 14]
list(tree.preorder())   # [8, 3, 1, 6, 4, 7, 10, 14, 13]
list(tree.postorder())  # [1, 4, 7, 6, 3, 13, 14, 10, 8]
```

`toolbench.tree_container.TreeContainer` wraps a tree with a chosen
`Traversal` (`"pre"`, `"in"` or `"post"`) and a `TreeCursor`:

```python
from toolbench.tree_container import TreeContainer

container = TreeContainer([8, 3, 1, 6, 4, 7, 10, 14, 13], traversal="pre")
container.cursor.next()          # 3
container.set_traversal("post")
container.first(), container.last()  # (1, 8)
6 in container                   # True
```

The container also offers `add`, `remove`, `count`, `clear`, `swap` and `merge`,
and iterates in its current traversal.

### Task scheduler

```python
from toolbench.scheduler import TaskScheduler

scheduler = TaskScheduler()
square_a = scheduler.add(lambda a: a * a, 3.0)
square_b = scheduler.add(lambda b: b * b, 4.0)
total = scheduler.add(
    lambda x, y: x + y,
    scheduler.get_future_result(square_a),
    scheduler.get_future_result(square_b),
)
hypotenuse = scheduler.add(lambda x: x ** 0.5, scheduler.get_future_result(total))
scheduler.execute_all()
scheduler.get_result(hypotenuse)  # 5.0
```

Each task runs at most once; `get_result` runs a task and whatever it depends
on if `execute_all` has not been called.

### Search

```python
from toolbench.query import parse_query
from toolbench.indexer import build_index
from toolbench.finder import find

build_index("texts", "index")
query = parse_query(["(bridge", "AND", "town)", "OR", "escape"])
query.words()  # ['bridge', 'town', 'escape']
find("index", "results.txt", ["bridge", "AND", "town"])
```

A malformed query raises `toolbench.query.QueryError`.

## What is not included

The package has no weather forecast: there is no command that fetches or
prints forecasts for cities. Nor does it provide pipeline adapters for
sequences (reverse, take, drop, filter, transform, keys, values joined with
`|`); Python's slicing, `reversed`, `filter`, `map` and dict views do that
work.
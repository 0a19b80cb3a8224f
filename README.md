# pathfinding

Graph, matching and matrix algorithms in pure Python. The package needs
nothing outside the standard library.

## Modules

- `pathfinding.kruskal`: `kruskal(edges)` yields the edges of a minimum
  spanning tree from `(a, b, weight)` triples. `kruskal_indices(number_of_nodes, edges)`
  does the same for nodes numbered `0 .. number_of_nodes - 1`. It raises
  `IndexError` when an edge names a node outside that range.
- `pathfinding.prim`: `prim(edges)` returns a minimum spanning tree as a list
  of `(from, to, weight)` edges. It starts from the first node of the first edge.
- `pathfinding.cliques`: `maximal_cliques(vertices, connected, consumer)` calls
  `consumer` with every maximal clique, as a set (Bron–Kerbosch).
  `maximal_cliques_collect(vertices, connected)` returns them as a list of sets.
  `connected(a, b)` tells whether two vertices are joined.
- `pathfinding.connected_components`:
  - `separate_components(groups)` returns a mapping from every vertex to a set
    identifier, and the identifier of every group. An empty group gets `None`.
  - `components(groups)` returns the disjoint sets of vertices.
  - `connected_components(starts, neighbours)` builds the groups from a
    neighbour function.
  - `component_index(components)` maps every vertex to the index of its set.
- `pathfinding.kuhn_munkres`: `kuhn_munkres(weights)` finds a maximum weight
  assignment of a distinct column to every row. `kuhn_munkres_min(weights)`
  finds a minimum weight one. `weights` may be a matrix or an iterable of
  equal-length rows. Both return `(total, assignments)`. They raise
  `ValueError` when there are more rows than columns.
- `pathfinding.matrix_base`: `MatrixBase` handles storage, construction and
  navigation:
  - constructors: `from_fn`, `new_square`, `from_vec`, `square_from_vec`,
    `new_empty`, `from_rows`;
  - editing: `extend`, `fill`, `swap`;
  - cells and neighbours: `idx`, `get`, `within_bounds`, `constrain`,
    `neighbours`;
  - movement: `move_in_direction`, `in_direction`;
  - iteration: over rows, `column_iter`, `keys`, `values`, `items`.

  The module also holds the direction constants `E`, `S`, `W`, `N`, `NE`,
  `SE`, `NW`, `SW`, `DIRECTIONS_4` and `DIRECTIONS_8`. Build and slice errors
  derive from `MatrixFormatError`: `EmptyRowError`, `WrongIndexError` and
  `WrongLengthError`. All of these are `ValueError`s.
- `pathfinding.matrix`: `Matrix` extends `MatrixBase` with:
  - `slice` and `set_slice`;
  - `rotate_cw`/`rotate_ccw` and `rotated_cw`/`rotated_ccw`;
  - `flip_lr`/`flip_ud` and `flipped_lr`/`flipped_ud`;
  - `transpose` and `transposed`;
  - `map` and negation;
  - flood fill with `bfs_reachable` and `dfs_reachable`, which return a set
    of coordinates.

  `matrix(*rows)` builds a `Matrix` from rows given as arguments.
- `pathfinding.utils`:
  - `uint_sqrt(n)` returns an exact integer square root or `None`.
  - `move_in_direction` and `in_direction` step across a board of given
    dimensions.
  - `constrain(value, upper)` wraps a value into `range(upper)`.
- `pathfinding.noderefs`: `NodeRefs` is a frozen set of nodes.
  `NodeRefs.of(node)` builds one holding a single node.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Best assignment of three buyers to three pieces of art:

```python
from pathfinding.matrix import Matrix
from pathfinding.kuhn_munkres import kuhn_munkres

weights = Matrix.from_rows([
    [100, 110, 90],
    [95, 130, 75],
    [95, 140, 65],
])
total, assignments = kuhn_munkres(weights)
assert total == 325
assert assignments == [2, 0, 1]
```

Minimum spanning tree:

```python
from pathfinding.prim import prim

edges = [("a", "b", 3), ("a", "e", 1), ("b", "c", 5), ("b", "e", 4),
         ("c", "d", 2), ("c", "e", 6), ("d", "e", 7)]
assert prim(edges) == [("a", "e", 1), ("a", "b", 3), ("b", "c", 5), ("c", "d", 2)]
```

Working with a matrix:

```python
from pathfinding.matrix import matrix

m = matrix([10, 20, 30], [40, 50, 60])
assert (m.rows, m.columns) == (2, 3)
assert m[1, 1] == 50
assert m.transposed().rows == 3
```

Moving across a board:

```python
from pathfinding.utils import in_direction

assert list(in_direction((0, 0), (1, 2), (8, 8))) == [(1, 2), (2, 4), (3, 6)]
```

## What it does not do

The package has no shortest-path or search routines for directed graphs.
There is no A*, breadth-first, depth-first or Dijkstra search, and no
maximum-flow solver. The only searches are the flood fills on `Matrix`. There
is no grid type with vertices that can be added and removed, and no
command-line program.
# gobion

Building blocks for program analysis and timed-automata reasoning:

- `gobion.scfg.cfg.Graph`: a control-flow graph made of blocks, conditions and jumps.
  A condition or jump whose expression is `None` is unconstrained, and the exit block
  has the id `-1`. `Graph.dot` writes it in Graphviz DOT form through
  `gobion.scfg.cfg_dot.Dot`.
- `gobion.scfg.scopes.ScopedGraph`: a control-flow graph whose blocks are placed in a
  tree of nested scopes (`zoom_in`, `zoom_out`, `into`, `blocks`, `transitive`).
  `ScopedGraph.dot` draws each scope as a DOT cluster through
  `gobion.scfg.scopes_dot.ScopedDot`.
- `gobion.zones.constraint`: `Relation`, a bound and its strictness packed into one
  integer (`relation`, `infinity`, `zero`, `add`, `negation`, `lt`/`le`/`gt`/`ge`),
  `Strictness`, and `Constraint` between two clocks.
- `gobion.zones.dbm`: `DBM`, a difference bound matrix with closure, `up`, `down`,
  `free`, `reset`, `assign`, `shift`, `norm`, `intersection`, `convex_union`,
  `relation`, `reduction` and consistency checks. `Federation` holds a list of DBMs
  over the same clocks.
- `gobion.zones.render`: `write_matrix`, `write_conjunctions` and
  `write_graphviz_digraph` print a DBM to any text stream.
- `gobion.graph`: `LabeledDirected`, a labelled directed graph over a `VertexMap` and an
  `EdgeSlice` or `EdgeMap`, with DOT output; `Edge` is a simple edge type.
- `gobion.structures`: `Queue`, `Stack`, `LinkedNode` and the `bottom_up` generator.
- `gobion.symbols`: `SymbolsFactory` and `SymbolsMap`, which intern items as integer symbols.
- `gobion.concrete`: `Bool`, `Int` (division truncates toward zero) and `Real` values.

## Installation

```
pip install .
```

Add the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Example: a clock zone

```python
import io

from gobion.zones.constraint import Strictness, infinity, relation
from gobion.zones.dbm import DBM
from gobion.zones.render import write_conjunctions

zone = DBM(3, infinity())                       # reference clock plus x and y
zone.set_lower(1, relation(-1, Strictness.STRICT))
zone.set_upper(1, relation(3, Strictness.STRICT))
zone.up()                                       # let time pass

out = io.StringIO()
write_conjunctions(zone, out, "x", "y")
print(out.getvalue())
```

## Example: a control-flow graph

```python
import io

from gobion.scfg.cfg import Graph

flow = Graph("i := 0")
condition = flow.jump_to(flow.entry(), flow.new_condition("i < 10"))
body, _ = flow.new_block("foo()")
flow.if_then_else(
    condition,
    flow.new_conditional_jump("true", body),
    flow.new_conditional_jump("false", flow.exit()),
)
flow.jump_to(body, condition)

out = io.StringIO()
flow.dot(out)
print(out.getvalue())
```

Statements and expressions can be any objects; in DOT labels they are shown with
`str()`. The DOT text can be fed to Graphviz to draw the graph.

## What this package does not do

- It does not parse program source code. Control-flow graphs and their scopes are
  built by hand through the `Graph` and `ScopedGraph` methods.
- It does not execute programs, symbolically or otherwise, and has no constraint solver.
- `Federation` only stores zones; it has no operations of its own.
- There is no command-line tool; everything is used as a library.
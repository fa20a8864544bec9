"""Control-flow graphs whose blocks are grouped into nested scopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TextIO

from gobion.scfg.cfg import Graph
from gobion.scfg.cfg_dot import dot_node_ast
from gobion.scfg.scopes_dot import ScopedDot


@dataclass
class _Scope:
    parent: int
    children: list[int] = field(default_factory=list)


class ScopedGraph:
    """A control-flow graph together with a tree of scopes over its blocks.

    Scope 0 is the global scope; every other scope has a parent scope.
    """

    def __init__(self, flow: Graph) -> None:
        self._flow = flow
        self._scopes: list[_Scope] = [_Scope(parent=0)]
        self._blocks: dict[int, int] = {}
        self._global = 0

    def _scope(self, id: int) -> _Scope:
        if not 0 <= id < len(self._scopes):
            raise IndexError(f"no scope with id {id}")
        return self._scopes[id]

    def cfg(self) -> Graph:
        """The underlying control-flow graph."""
        return self._flow

    def global_scope(self) -> int:
        return self._global

    def into(self, scope: int, *blocks: int) -> None:
        """Place the given blocks in ``scope``, moving them from any earlier scope."""
        for block in blocks:
            self._blocks[block] = scope

    def blocks(self, scope: int) -> list[int]:
        """The blocks placed directly in ``scope``, in the order they were placed."""
        return [block for block, owner in self._blocks.items() if owner == scope]

    def parent(self, id: int) -> Optional[int]:
        """The parent of scope ``id``, or None for the global scope."""
        if id == self._global:
            return None
        return self._scope(id).parent

    def children(self, id: int) -> list[int]:
        return list(self._scope(id).children)

    def scope_with(self, block: int) -> Optional[int]:
        """The scope holding ``block``, or None if it was never placed."""
        return self._blocks.get(block)

    def zoom_in(self, parent: int) -> int:
        """Open a new scope nested in ``parent`` and return its id."""
        owner = self._scope(parent)
        self._scopes.append(_Scope(parent=parent))
        child = len(self._scopes) - 1
        owner.children.append(child)
        return child

    def zoom_out(self, scope: int) -> Optional[int]:
        """The scope enclosing ``scope``, or None for the global scope."""
        return self.parent(scope)

    def transitive(self, parent: int) -> list[int]:
        """The blocks of ``parent`` and of every scope nested within it."""
        blocks: list[int] = []
        visited: set[int] = set()
        pending = [parent]
        while pending:
            scope = pending.pop()
            if scope in visited:
                continue
            visited.add(scope)
            blocks.extend(self.blocks(scope))
            pending.extend(reversed(self.children(scope)))
        return blocks

    def dot(self, writer: TextIO) -> None:
        """Write the graph in Graphviz DOT form with one cluster per scope."""
        ScopedDot(dot_node_ast, dot_node_ast).graph(writer, self)
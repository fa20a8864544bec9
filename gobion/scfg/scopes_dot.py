"""Graphviz DOT rendering of scoped control-flow graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TextIO

from gobion.scfg.cfg_dot import Dot, dot_node

if TYPE_CHECKING:
    from gobion.scfg.scopes import ScopedGraph


class ScopedDot:
    """Writes scoped control-flow graphs, drawing each scope as a cluster."""

    def __init__(
        self,
        statement_stringer: Callable[[Any], str],
        expression_stringer: Callable[[Any], str],
    ) -> None:
        self.statement_stringer = statement_stringer
        self.expression_stringer = expression_stringer
        self.flow_dot = Dot(statement_stringer, expression_stringer)

    def graph(self, writer: TextIO, graph: "ScopedGraph") -> None:
        writer.write("digraph G {\n")
        self.nodes(writer, graph.global_scope(), graph)
        self.flow_dot.edges(writer, graph.cfg())
        writer.write("}\n")

    def nodes(self, writer: TextIO, scope: int, graph: "ScopedGraph") -> None:
        """Write the endpoint nodes and the clusters of ``scope`` and its descendants."""
        writer.write(dot_node("initial", {"shape": "point"}))
        writer.write(dot_node("terminal", {"shape": "point"}))
        self._cluster(writer, scope, graph)

    def _cluster(self, writer: TextIO, scope: int, graph: "ScopedGraph") -> None:
        flow = graph.cfg()
        writer.write(f"subgraph cluster_{scope} {{\n")
        for block in graph.blocks(scope):
            self.flow_dot.block(writer, flow, block)
            _, condition = flow.block(block)
            if flow.is_constrained(condition):
                self.flow_dot.condition(writer, flow, condition)
        for child in graph.children(scope):
            self._cluster(writer, child, graph)
        writer.write("}\n")
"""Graphviz DOT rendering of control-flow graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable, Mapping, Optional, TextIO

if TYPE_CHECKING:
    from gobion.scfg.cfg import Graph

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(text: str) -> str:
    pieces = []
    for char in text:
        if char in _ESCAPES:
            pieces.append(_ESCAPES[char])
        elif char.isprintable():
            pieces.append(char)
        elif ord(char) < 0x80:
            pieces.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            pieces.append(f"\\u{ord(char):04x}")
        else:
            pieces.append(f"\\U{ord(char):08x}")
    return '"' + "".join(pieces) + '"'


def dot_attributes(attributes: Optional[Mapping[str, str]]) -> str:
    """Render attributes as ``key=value`` pairs separated by commas."""
    return ", ".join(f"{key}={value}" for key, value in (attributes or {}).items())


def dot_node_ast(node: Any) -> str:
    """Render a node, or a list of nodes one per line, as a quoted label."""
    if node is None:
        return '""'
    if isinstance(node, (list, tuple)):
        text = "\n".join(str(item) for item in node)
    else:
        text = str(node)
    return _quote(text.replace("\t", ""))


def dot_node(id: Any, attributes: Optional[Mapping[str, str]]) -> str:
    return f"{id} [{dot_attributes(attributes)}]\n"


def dot_edge(source: Any, destination: Any, attributes: Optional[Mapping[str, str]]) -> str:
    return f"{source} -> {destination} [{dot_attributes(attributes)}]\n"


def dot_block_attributes(node: Any) -> dict[str, str]:
    return {"label": dot_node_ast(node), "shape": "rectangle"}


def dot_condition_attributes(node: Any) -> dict[str, str]:
    return {"label": dot_node_ast(node), "shape": "diamond"}


def dot_jump_attributes(node: Any) -> dict[str, str]:
    return {"label": dot_node_ast(node)}


def dot_id_for(prefix: str, element: Hashable, ids: dict) -> tuple[str, bool]:
    """Return the DOT id of ``element`` and whether it was assigned just now."""
    if element in ids:
        return f"{prefix}{ids[element]}", False
    ids[element] = len(ids)
    return f"{prefix}{ids[element]}", True


class Dot:
    """Writes control-flow graphs, numbering blocks and conditions as it meets them."""

    def __init__(
        self,
        statement_stringer: Callable[[Any], str],
        expression_stringer: Callable[[Any], str],
    ) -> None:
        self.block_ids: dict[int, int] = {}
        self.condition_ids: dict[int, int] = {}
        self.statement_stringer = statement_stringer
        self.expression_stringer = expression_stringer

    def graph(self, writer: TextIO, graph: "Graph") -> None:
        writer.write("digraph G {\n")
        self.nodes(writer, graph)
        self.edges(writer, graph)
        writer.write("}\n")

    def nodes(self, writer: TextIO, graph: "Graph") -> None:
        writer.write(dot_node("initial", {"shape": "point"}))
        writer.write(dot_node("terminal", {"shape": "point"}))
        for block in graph.blocks():
            self.block(writer, graph, block)
            _, condition = graph.block(block)
            if graph.is_constrained(condition):
                self.condition(writer, graph, condition)

    def edges(self, writer: TextIO, graph: "Graph") -> None:
        drawn: set[int] = set()
        for block in graph.blocks():
            block_id, _ = dot_id_for("block_", block, self.block_ids)
            source = block_id

            _, condition = graph.block(block)
            if graph.is_constrained(condition):
                source, _ = dot_id_for("condition_", condition, self.condition_ids)
                writer.write(dot_edge(block_id, source, None))

            _, jumps = graph.condition(condition)
            for jump in jumps:
                if jump not in drawn:
                    self.jump(writer, graph, source, jump)
                    drawn.add(jump)

        entry_id, _ = dot_id_for("block_", graph.entry(), self.block_ids)
        writer.write(dot_edge("initial", entry_id, None))

    def block(self, writer: TextIO, graph: "Graph", block: int) -> None:
        """Write the node of a block the first time it is met."""
        block_id, first = dot_id_for("block_", block, self.block_ids)
        if first:
            statements, _ = graph.block(block)
            writer.write(dot_node(block_id, dot_block_attributes(statements)))

    def condition(self, writer: TextIO, graph: "Graph", condition: int) -> None:
        """Write the node of a constrained condition the first time it is met."""
        if not graph.is_constrained(condition):
            return
        condition_id, first = dot_id_for("condition_", condition, self.condition_ids)
        if first:
            expression, _ = graph.condition(condition)
            writer.write(dot_node(condition_id, dot_condition_attributes(expression)))

    def jump(self, writer: TextIO, graph: "Graph", source: str, jump: int) -> None:
        expression, destination = graph.jump(jump)
        target = "terminal"
        if destination != graph.exit():
            target, _ = dot_id_for("block_", destination, self.block_ids)
        writer.write(dot_edge(source, target, dot_jump_attributes(expression)))
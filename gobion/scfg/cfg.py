"""Control-flow graphs of blocks, branching conditions and jumps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, TextIO, TypeVar

from gobion.scfg.cfg_dot import Dot, dot_node_ast

_T = TypeVar("_T")

# The block id that stands for leaving the graph.
EXIT = -1


@dataclass
class _Block:
    statements: list
    condition: int = 0


@dataclass
class _Condition:
    expression: Any
    jumps: list[int] = field(default_factory=list)


@dataclass
class _Jump:
    expression: Any
    destination: int


def _lookup(items: Sequence[_T], id: int, kind: str) -> _T:
    if not 0 <= id < len(items):
        raise IndexError(f"no {kind} with id {id}")
    return items[id]


class Graph:
    """A control-flow graph.

    Every block ends in a condition; a condition holds the jumps that may be
    taken from it. A condition or jump without an expression (None) is
    unconstrained.
    """

    def __init__(self, *statements: Any) -> None:
        self._blocks: list[_Block] = []
        self._conditions: list[_Condition] = []
        self._jumps: list[_Jump] = []
        self._entry, _ = self.new_block(*statements)
        self._exit = EXIT

    def new_block(self, *statements: Any) -> tuple[int, int]:
        """Add a block ending in a fresh unconstrained condition; return both ids."""
        self._blocks.append(_Block(list(statements)))
        block = len(self._blocks) - 1
        condition = self.jump_to(block, self.new_unconstrained_condition())
        return block, condition

    def new_condition(self, expression: Any, *jumps: int) -> int:
        self._conditions.append(_Condition(expression, list(jumps)))
        return len(self._conditions) - 1

    def new_unconstrained_condition(self, *jumps: int) -> int:
        return self.new_condition(None, *jumps)

    def new_conditional_jump(self, expression: Any, destination: int) -> int:
        self._jumps.append(_Jump(expression, destination))
        return len(self._jumps) - 1

    def new_unconditional_jump(self, destination: int) -> int:
        return self.new_conditional_jump(None, destination)

    def blocks(self) -> list[int]:
        return list(range(len(self._blocks)))

    def append(self, block: int, *statements: Any) -> None:
        _lookup(self._blocks, block, "block").statements.extend(statements)

    def block(self, id: int) -> tuple[list, int]:
        """Return the statements of a block and the id of its condition."""
        found = _lookup(self._blocks, id, "block")
        return list(found.statements), found.condition

    def condition(self, id: int) -> tuple[Any, list[int]]:
        """Return the expression of a condition and the ids of its jumps."""
        found = _lookup(self._conditions, id, "condition")
        return found.expression, list(found.jumps)

    def jump(self, id: int) -> tuple[Any, int]:
        """Return the expression of a jump and its destination block."""
        found = _lookup(self._jumps, id, "jump")
        return found.expression, found.destination

    def is_constrained(self, condition: int) -> bool:
        return not self.is_unconstrained(condition)

    def is_unconstrained(self, condition: int) -> bool:
        expression, _ = self.condition(condition)
        return expression is None

    def entry(self) -> int:
        return self._entry

    def exit(self) -> int:
        return self._exit

    def sequence(self, source: int, destination: int) -> None:
        """Make ``source`` continue unconditionally to ``destination``."""
        jump = self.new_unconditional_jump(destination)
        self.jump_to(source, self.new_unconstrained_condition(jump))

    def if_then_else(self, condition: int, consequence: int, alternative: int) -> None:
        self.jump_from(condition, consequence)
        self.jump_from(condition, alternative)

    def jump_from(self, condition: int, jump: int) -> None:
        _lookup(self._conditions, condition, "condition").jumps.append(jump)

    def jump_to(self, source: int, condition: int) -> int:
        """End block ``source`` in ``condition`` and return the condition."""
        _lookup(self._blocks, source, "block").condition = condition
        return condition

    def dot(self, writer: TextIO) -> None:
        """Write the graph in Graphviz DOT form."""
        Dot(dot_node_ast, dot_node_ast).graph(writer, self)
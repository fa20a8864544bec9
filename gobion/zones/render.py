"""Text renderings of difference bound matrices."""

from __future__ import annotations

from typing import TextIO

from gobion.zones.constraint import REFERENCE
from gobion.zones.dbm import DBM


def write_matrix(dbm: DBM, writer: TextIO) -> None:
    """Write one bracketed line per row, each bound as a tuple or ∞."""
    for row in range(REFERENCE, dbm.clocks):
        cells = ", ".join(str(dbm.constraint(row, column)) for column in range(REFERENCE, dbm.clocks))
        writer.write(f"[{cells}]\n")


def write_conjunctions(dbm: DBM, writer: TextIO, *labels: str) -> None:
    """Write every finite bound as a conjunction of inequalities.

    ``labels`` name the clocks after the reference clock, in order.
    """
    parts: list[str] = []
    for row in range(REFERENCE, dbm.clocks):
        for column in range(REFERENCE, dbm.clocks):
            if row == REFERENCE and column == REFERENCE:
                continue
            element = dbm.constraint(row, column)
            if element.is_infinity():
                continue
            strictness = str(element.strictness())
            limit = element.limit()
            if row == REFERENCE:
                parts.append(f"-{labels[column - 1]} {strictness} {limit}")
            elif column == REFERENCE:
                parts.append(f"{labels[row - 1]} {strictness} {limit}")
            else:
                parts.append(f"{labels[row - 1]} - {labels[column - 1]} {strictness} {limit}")
    writer.write(" ∧ ".join(parts))


def write_graphviz_digraph(dbm: DBM, writer: TextIO, distances: bool, *labels: str) -> None:
    """Write the DBM as a complete Graphviz digraph.

    ``labels`` name every clock, the reference clock included. With
    ``distances`` the edges carry only the limits.
    """
    writer.write("digraph {\n")
    for clock in range(REFERENCE, dbm.clocks):
        writer.write(f'{clock} [label="{labels[clock]}" shape="circle"]\n')
    for row in range(REFERENCE, dbm.clocks):
        for column in range(REFERENCE, dbm.clocks):
            constraint = dbm.constraint(row, column)
            label = str(constraint.limit()) if distances else str(constraint)
            writer.write(f'{row} -> {column} [label="{label}"]\n')
    writer.write("}")
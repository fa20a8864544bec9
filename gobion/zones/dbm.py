"""Difference bound matrices over a fixed set of clocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from gobion.graph import EdgeSlice
from gobion.zones.constraint import (
    INFINITY,
    REFERENCE,
    STRICT,
    WEAK,
    ZERO,
    Clock,
    Constraint,
    Relation,
)
from gobion.zones.constraint import relation as make_relation


class DBM:
    """A dense ``clocks x clocks`` matrix of relations between clocks.

    Clock 0 is the reference clock. Row ``i``, column ``j`` holds the bound
    ``i - j ~ n``.
    """

    def __init__(self, clocks: int, filler: Relation) -> None:
        if clocks <= 0:
            raise ValueError("a DBM requires at least one clock to act as the reference clock")
        self._clocks = clocks
        self._data: list[Relation] = [
            ZERO if row == column or row == REFERENCE else filler
            for row in range(clocks)
            for column in range(clocks)
        ]

    @property
    def clocks(self) -> int:
        """The number of clocks, the reference clock included."""
        return self._clocks

    def copy(self) -> "DBM":
        duplicate = DBM.__new__(DBM)
        duplicate._clocks = self._clocks
        duplicate._data = list(self._data)
        return duplicate

    def index(self, row: Clock, column: Clock) -> int:
        """Return the row-major position of ``(row, column)`` in the matrix."""
        if not (0 <= row < self._clocks and 0 <= column < self._clocks):
            raise IndexError(f"clock pair ({row}, {column}) is outside the DBM")
        return row * self._clocks + column

    def constraint(self, row: Clock, column: Clock) -> Relation:
        return self._data[self.index(row, column)]

    def constrain(self, row: Clock, column: Clock, relation: Relation) -> None:
        self._data[self.index(row, column)] = relation

    def _range(self, start: Clock = REFERENCE) -> range:
        return range(start, self._clocks)

    def floyd_warshall(self) -> None:
        """Tighten every bound through every intermediate clock."""
        for k in self._range():
            for i in self._range():
                for j in self._range():
                    through = self.constraint(i, k).add(self.constraint(k, j))
                    if through.lt(self.constraint(i, j)):
                        self.constrain(i, j, through)

    def relation(self, other: "DBM", start: Clock, stop: Clock) -> tuple[bool, bool]:
        """Return ``(subset, superset)`` of this DBM against ``other`` on clocks ``[start, stop)``."""
        subset = superset = True
        for row in range(start, stop):
            for column in range(start, stop):
                if not subset and not superset:
                    return subset, superset
                mine = self.constraint(row, column)
                theirs = other.constraint(row, column)
                subset = subset and mine.le(theirs)
                superset = superset and mine.ge(theirs)
        return subset, superset

    def intersection(self, other: "DBM", start: Clock, stop: Clock) -> bool:
        """Intersect this DBM with ``other`` in place; False if the result is empty."""
        for row in range(start, stop):
            for column in range(start, stop):
                bound = other.constraint(row, column)
                if self.constraint(row, column).gt(bound):
                    self.constrain(row, column, bound)
                    if bound.negation().ge(self.constraint(column, row)):
                        return False
        return True

    def convex_union(self, other: "DBM", start: Clock, stop: Clock) -> None:
        """Loosen this DBM in place to the convex hull of itself and ``other``."""
        for row in range(start, stop):
            for column in range(start, stop):
                bound = other.constraint(row, column)
                if self.constraint(row, column).lt(bound):
                    self.constrain(row, column, bound)

    def constrain_and_close(self, row: Clock, column: Clock, element: Relation) -> None:
        """Tighten one bound and restore closure over the affected paths."""
        if self.constraint(row, column).gt(element):
            self.constrain(row, column, element)
            if element.negation().ge(self.constraint(column, row)):
                self.empty()
            self.close_row_column(row, column)

    def close_row_column(self, row: Clock, column: Clock) -> None:
        """Recompute the shortest paths that run through the edge ``row -> column``."""
        if self._clocks <= 2:
            return

        path_rc = self.constraint(row, column)

        for i in self._range():
            path_ci = self.constraint(column, i)
            if path_ci.is_infinity():
                continue
            through = path_rc.add(path_ci)
            if self.constraint(row, i).encoded > through.encoded:
                self.constrain(row, i, through)

        for i in self._range():
            path_ir = self.constraint(i, row)
            if path_ir.is_infinity():
                continue
            path_ic = path_ir.add(path_rc)
            if self.constraint(i, column).le(path_ic):
                continue
            self.constrain(i, column, path_ic)

            for j in self._range():
                path_cj = self.constraint(column, j)
                if path_cj.is_infinity():
                    continue
                path_ij = path_ic.add(path_cj)
                if self.constraint(i, j).gt(path_ij):
                    self.constrain(i, j, path_ij)

    def close(self) -> None:
        """Close the DBM, marking it empty when a bound drops below (0, ≤)."""
        for k in self._range():
            for i in self._range():
                if i == k:
                    continue
                for j in self._range():
                    path_ik = self.constraint(i, k)
                    if path_ik.is_infinity():
                        continue
                    path_kj = self.constraint(k, j)
                    if path_kj.is_infinity():
                        continue
                    path_ikj = path_ik.add(path_kj)
                    if self.constraint(i, j).gt(path_ikj):
                        self.constrain(i, j, path_ikj)
                    if self.constraint(i, j).lt(ZERO):
                        self.empty()

    def reduction(self) -> EdgeSlice:
        """Return the non-redundant constraints between the non-reference clocks."""
        redundant: set[int] = set()
        for k in self._range(1):
            for i in self._range(1):
                if i == k:
                    continue
                for j in self._range(1):
                    path_ik = self.constraint(i, k)
                    if path_ik.is_infinity():
                        continue
                    path_kj = self.constraint(k, j)
                    if path_kj.is_infinity():
                        continue
                    if self.constraint(i, j).le(path_ik.add(path_kj)):
                        redundant.add(self.index(i, j))

        return EdgeSlice(
            [
                Constraint(row, column, self.constraint(row, column))
                for row in self._range(1)
                for column in self._range(1)
                if self.index(row, column) not in redundant
            ]
        )

    def is_closed(self) -> bool:
        for i in self._range():
            for row in self._range():
                for column in self._range():
                    path_row_i = self.constraint(row, column)
                    if path_row_i.is_infinity():
                        continue
                    path_i_column = self.constraint(i, column)
                    if path_i_column.is_infinity():
                        continue
                    if self.constraint(row, column).gt(path_row_i.add(path_i_column)):
                        return False
        return True

    def equals(self, other: "DBM", start: Clock, stop: Clock) -> bool:
        """True when both DBMs hold the same bounds on clocks ``[start, stop)``."""
        return all(
            self.constraint(row, column) == other.constraint(row, column)
            for row in range(start, stop)
            for column in range(start, stop)
        )

    def empty(self) -> None:
        """Mark the DBM as empty by making the reference diagonal negative."""
        self.set_diagonal(REFERENCE, make_relation(-1, STRICT))

    def is_consistent(self) -> bool:
        """False when the DBM is empty; an inconsistent DBM is also marked empty."""
        if self.diagonal(REFERENCE).lt(ZERO):
            return False
        for clock in self._range():
            if self.upper(clock).lt(self.lower(clock)) or self.diagonal(clock).lt(ZERO):
                self.empty()
                return False
        return True

    def upper(self, clock: Clock) -> Relation:
        """The bound ``clock - 0 ~ n``."""
        return self.constraint(clock, REFERENCE)

    def set_upper(self, clock: Clock, element: Relation) -> None:
        self.constrain(clock, REFERENCE, element)

    def lower(self, clock: Clock) -> Relation:
        """The bound ``0 - clock ~ n``."""
        return self.constraint(REFERENCE, clock)

    def set_lower(self, clock: Clock, element: Relation) -> None:
        self.constrain(REFERENCE, clock, element)

    def diagonal(self, clock: Clock) -> Relation:
        return self.constraint(clock, clock)

    def set_diagonal(self, clock: Clock, relation: Relation) -> None:
        self.constrain(clock, clock, relation)

    def up(self) -> None:
        """Let time pass: drop the upper bound of every clock."""
        for clock in self._range(1):
            self.set_upper(clock, INFINITY)

    def down(self) -> None:
        """Compute the states that can reach this zone by letting time pass."""
        for i in self._range(1):
            if self.lower(i) != ZERO:
                self.set_lower(i, ZERO)
                for j in self._range(1):
                    if self.constraint(j, i).lt(self.lower(i)):
                        self.set_lower(i, self.constraint(j, i))

    def satisfies(self, row: Clock, column: Clock, relation: Relation) -> bool:
        """True when the bound ``row - column ~ n`` intersects the DBM."""
        positive = self.constraint(row, column)
        negative = self.constraint(column, row)
        return not (positive.encoded > relation.encoded and relation.negation().ge(negative))

    def can_delay_indefinitely(self) -> bool:
        return all(self.upper(clock).is_infinity() for clock in self._range(1))

    def free(self, *clocks: Clock) -> None:
        """Remove every constraint on the given clocks."""
        for clock in clocks:
            for dimension in self._range():
                if dimension != clock:
                    self.constrain(clock, dimension, INFINITY)
                    self.constrain(dimension, clock, self.upper(dimension))

    def reset(self, clock: Clock, limit: int) -> None:
        """Assign ``clock := limit``."""
        positive = make_relation(limit, WEAK)
        negative = make_relation(-limit, WEAK)
        for dimension in self._range():
            self.constrain(clock, dimension, positive.add(self.lower(dimension)))
            self.constrain(dimension, clock, self.upper(dimension).add(negative))

    def assign(self, lhs: Clock, rhs: Clock) -> None:
        """Assign ``lhs := rhs``."""
        for dimension in self._range():
            if dimension != lhs:
                self.constrain(lhs, dimension, self.constraint(rhs, dimension))
                self.constrain(dimension, lhs, self.constraint(dimension, rhs))
        self.constrain(lhs, rhs, ZERO)
        self.constrain(rhs, lhs, ZERO)

    def shift(self, clock: Clock, limit: int) -> None:
        """Assign ``clock := clock + limit``, clamping its bounds at zero."""
        positive = make_relation(limit, WEAK)
        negative = make_relation(-limit, WEAK)
        for i in self._range():
            if i != clock:
                self.constrain(clock, i, self.constraint(clock, i).add(positive))
                self.constrain(i, clock, self.constraint(i, clock).add(negative))

        if self.lower(clock).gt(ZERO):
            self.set_lower(clock, ZERO)
        if self.upper(clock).lt(ZERO):
            self.set_upper(clock, ZERO)

    def norm(self, *maximums: int) -> None:
        """Extrapolate bounds beyond each clock's maximal constant, then close."""
        for i in self._range(1):
            maximum = maximums[i - 1]
            positive = make_relation(maximum, WEAK)
            negative = make_relation(maximum, STRICT)

            if self.upper(i).gt(positive):
                self.set_upper(i, INFINITY)
            if self.lower(i).gt(negative):
                self.set_lower(i, negative)

            for j in self._range(1):
                if i == j:
                    continue
                bound = self.constraint(i, j)
                if bound.is_infinity():
                    continue
                if bound.gt(positive):
                    self.constrain(i, j, INFINITY)
                elif bound.lt(negative):
                    self.constrain(i, j, negative)

        self.close()


@dataclass
class Federation:
    """A set of zones over the same clocks."""

    clocks: int
    zones: list[DBM] = field(default_factory=list)
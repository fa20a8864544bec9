import io

import pytest

from gobion.zones.constraint import INFINITY, REFERENCE, STRICT, ZERO, relation
from gobion.zones.dbm import DBM
from gobion.zones.render import write_conjunctions, write_graphviz_digraph, write_matrix


def fig11() -> DBM:
    dbm = DBM(1 + 2, INFINITY)
    dbm.set_lower(1, relation(-1, STRICT))
    dbm.set_upper(1, relation(3, STRICT))
    dbm.set_lower(2, relation(-2, STRICT))
    dbm.set_upper(2, relation(3, STRICT))
    return dbm


def conjunctions(dbm: DBM, *labels: str) -> str:
    buffer = io.StringIO()
    write_conjunctions(dbm, buffer, *labels)
    return buffer.getvalue()


def test_foo_conjunctions():
    dbm = DBM(1 + 2, INFINITY)
    dbm.set_lower(1, relation(-3, STRICT))
    dbm.set_upper(1, relation(5, STRICT))
    dbm.set_lower(2, relation(-1, STRICT))
    dbm.set_upper(2, relation(2, STRICT))

    assert conjunctions(dbm, "x", "y") == (
        "-x < -3 ∧ -y < -1 ∧ x < 5 ∧ x - x ≤ 0 ∧ y < 2 ∧ y - y ≤ 0"
    )


def test_bar_conjunctions():
    dbm = DBM(1 + 2, ZERO)

    assert conjunctions(dbm, "x", "y") == (
        "-x ≤ 0 ∧ -y ≤ 0 ∧ x ≤ 0 ∧ x - x ≤ 0 ∧ x - y ≤ 0"
        " ∧ y ≤ 0 ∧ y - x ≤ 0 ∧ y - y ≤ 0"
    )


def test_fig11_shift_conjunctions():
    dbm = fig11()

    dbm.shift(2, 1)

    assert conjunctions(dbm, "x", "y") == (
        "-x < -1 ∧ -y < -3 ∧ x < 3 ∧ x - x ≤ 0 ∧ y < 4 ∧ y - y ≤ 0"
    )


def test_fig11_norm_conjunctions():
    dbm = fig11()

    dbm.norm(2, 1)

    assert conjunctions(dbm, "x", "y") == "-x < -1 ∧ -y < -2 ∧ x - x ≤ 0 ∧ y - y ≤ 0"
    assert dbm.diagonal(REFERENCE) == relation(-1, STRICT)


def test_conjunctions_of_reference_only_dbm_is_empty():
    assert conjunctions(DBM(1, ZERO)) == ""


def test_conjunctions_need_a_label_per_clock():
    with pytest.raises(IndexError):
        conjunctions(DBM(3, ZERO), "x")


def test_write_matrix():
    dbm = DBM(2, INFINITY)
    buffer = io.StringIO()

    write_matrix(dbm, buffer)

    assert buffer.getvalue() == "[(0, ≤), (0, ≤)]\n[∞, (0, ≤)]\n"


def test_write_matrix_has_one_line_per_clock():
    buffer = io.StringIO()

    write_matrix(fig11(), buffer)

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 3
    assert all(line.startswith("[") and line.endswith("]") for line in lines)


def test_write_graphviz_digraph_with_relations():
    dbm = DBM(2, INFINITY)
    buffer = io.StringIO()

    write_graphviz_digraph(dbm, buffer, False, "0", "x")

    assert buffer.getvalue() == (
        "digraph {\n"
        '0 [label="0" shape="circle"]\n'
        '1 [label="x" shape="circle"]\n'
        '0 -> 0 [label="(0, ≤)"]\n'
        '0 -> 1 [label="(0, ≤)"]\n'
        '1 -> 0 [label="∞"]\n'
        '1 -> 1 [label="(0, ≤)"]\n'
        "}"
    )


def test_write_graphviz_digraph_with_distances():
    dbm = fig11()
    buffer = io.StringIO()

    write_graphviz_digraph(dbm, buffer, True, "0", "x", "y")

    text = buffer.getvalue()
    assert '0 -> 1 [label="-1"]\n' in text
    assert '1 -> 0 [label="3"]\n' in text
    assert '2 -> 2 [label="0"]\n' in text
    assert text.endswith("}")
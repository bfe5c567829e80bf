import itertools

import pytest

from antcolony.qap import (
    QAPFormatError,
    QAPInstance,
    has_null_diagonal,
    is_symmetric,
    make_symmetric,
    parse_qap,
    read_qap,
)

SYMMETRIC_TEXT = """2
0 1
1 0
0 5
5 0
"""

D3 = [[0, 2, 3], [2, 0, 4], [3, 4, 0]]
F3_ASYM = [[0, 1, 7], [2, 0, 3], [5, 6, 0]]


def _text(n, *matrices, header=None):
    lines = [header if header is not None else str(n)]
    for m in matrices:
        lines.extend(" ".join(str(x) for x in row) for row in m)
    return "\n".join(lines) + "\n"


def test_symmetry_and_diagonal_checks():
    assert is_symmetric(D3)
    assert not is_symmetric(F3_ASYM)
    assert has_null_diagonal(D3)
    assert not has_null_diagonal([[1, 0], [0, 0]])


def test_make_symmetric_keeps_diagonal():
    m = [[4, 1], [3, 9]]
    result = make_symmetric(m)
    assert is_symmetric(result)
    assert result[0][0] == 4 and result[1][1] == 9
    assert result[0][1] == m[0][1] + m[1][0]
    assert m == [[4, 1], [3, 9]]


def test_parse_small_instance_objective():
    inst = parse_qap(SYMMETRIC_TEXT, "tiny")
    assert inst.n == 2
    assert inst.name == "tiny"
    assert not inst.halve_objective
    assert inst.objective([0, 1]) == 10
    assert inst.objective([1, 0]) == 10


def test_best_known_value_on_size_line_is_ignored():
    inst = parse_qap(_text(3, D3, F3_ASYM, header="3 1234"), "x")
    assert inst.n == 3


def test_asymmetric_conversion_preserves_objective():
    inst = parse_qap(_text(3, D3, F3_ASYM), "asym")
    assert inst.halve_objective
    assert is_symmetric(inst.flow)
    raw = QAPInstance("raw", D3, F3_ASYM)
    for perm in itertools.permutations(range(3)):
        assert inst.objective(perm) == raw.objective(perm)


def test_check_solution():
    inst = parse_qap(_text(3, D3, D3), "s")
    assert inst.check_solution([2, 0, 1])
    assert not inst.check_solution([0, 0, 1])


def test_missing_size_raises():
    with pytest.raises(QAPFormatError):
        parse_qap("\n0 1\n1 0\n", "bad")


def test_truncated_matrix_raises():
    with pytest.raises(QAPFormatError, match="EOF"):
        parse_qap("2\n0 1\n1 0\n0 5\n", "bad")


def test_non_integer_entry_raises():
    with pytest.raises(QAPFormatError, match="abc"):
        parse_qap("2\n0 abc\n1 0\n0 5\n5 0\n", "bad")


def test_read_qap_from_file(tmp_path):
    path = tmp_path / "tiny.dat"
    path.write_text(SYMMETRIC_TEXT)
    inst = read_qap(path)
    assert inst.name == str(path)
    assert inst.distance == [[0, 1], [1, 0]]
    assert inst.flow == [[0, 5], [5, 0]]
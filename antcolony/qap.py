"""Quadratic assignment problem instances: reading and evaluation."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

_NAME_MAX = 254

Matrix = list[list[int]]


class QAPFormatError(ValueError):
    """Raised when a QAP instance file cannot be parsed."""


def is_symmetric(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if ``matrix[i][j] == matrix[j][i]`` everywhere."""
    return all(
        row[j] == matrix[j][i] for i, row in enumerate(matrix) for j in range(i)
    )


def has_null_diagonal(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if every diagonal entry is zero."""
    return all(row[i] == 0 for i, row in enumerate(matrix))


def make_symmetric(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return M + M^T off the diagonal; the diagonal is kept unchanged."""
    result = [list(row) for row in matrix]
    for i, row in enumerate(result):
        for j in range(i):
            total = matrix[i][j] + matrix[j][i]
            row[j] = total
            result[j][i] = total
    return result


@dataclass
class QAPInstance:
    """A QAP instance with distance and flow matrices."""

    name: str
    distance: Matrix
    flow: Matrix
    halve_objective: bool = False
    distance_symmetric: bool = False
    flow_symmetric: bool = False
    null_diagonal: bool = False

    @property
    def n(self) -> int:
        return len(self.distance)

    def objective(self, assignment: Sequence[int]) -> int:
        """Cost of assigning item ``assignment[i]`` to location ``i``."""
        flow = self.flow
        value = sum(
            d_ij * flow_i[assignment[j]]
            for d_row, flow_i in ((self.distance[i], flow[p]) for i, p in enumerate(assignment[: self.n]))
            for j, d_ij in enumerate(d_row)
        )
        if self.halve_objective:
            value //= 2
        return value

    def check_solution(self, assignment: Sequence[int]) -> bool:
        """Return True if ``assignment`` is a permutation of ``range(n)``."""
        solution = list(assignment[: self.n])
        if len(solution) == self.n and sorted(solution) == list(range(self.n)):
            return True
        print(
            "check_solution:error: solution_vector: "
            + " ".join(str(x) for x in solution),
            file=sys.stderr,
        )
        return False


def _read_size(first_line: str) -> int:
    fields = first_line.split()
    if not fields:
        raise QAPFormatError("error reading qap size value in data file")
    try:
        return int(fields[0])
    except ValueError:
        raise QAPFormatError("error reading qap size value in data file") from None


def _read_matrix(tokens, size: int) -> Matrix:
    matrix: Matrix = []
    for i in range(size):
        row = []
        for j in range(size):
            token = next(tokens, None)
            if token is None:
                raise QAPFormatError(
                    f"error reading matrix in data file at ({i}, {j}): "
                    "read error or EOF"
                )
            try:
                row.append(int(token))
            except ValueError:
                raise QAPFormatError(
                    f"error reading matrix in data file at ({i}, {j}): "
                    f"could not convert string `{token}' to int"
                ) from None
        matrix.append(row)
    return matrix


def parse_qap(text: str, name: str) -> QAPInstance:
    """Parse a QAP instance: a size line, then the distance and flow matrices.

    If exactly one matrix is symmetric and one has a null diagonal, the
    asymmetric matrix is made symmetric and the objective is halved.
    """
    first_line, _, rest = text.partition("\n")
    size = _read_size(first_line)
    tokens = iter(rest.split())
    distance = _read_matrix(tokens, size)
    flow = _read_matrix(tokens, size)

    d_symmetric = is_symmetric(distance)
    null_diagonal = has_null_diagonal(distance) or has_null_diagonal(flow)
    f_symmetric = is_symmetric(flow)

    halve = d_symmetric != f_symmetric
    if halve and null_diagonal:
        if not d_symmetric:
            distance = make_symmetric(distance)
        else:
            flow = make_symmetric(flow)

    return QAPInstance(
        name=name[:_NAME_MAX],
        distance=distance,
        flow=flow,
        halve_objective=halve,
        distance_symmetric=d_symmetric,
        flow_symmetric=f_symmetric,
        null_diagonal=null_diagonal,
    )


def read_qap(path) -> QAPInstance:
    """Read a QAP instance file; the instance is named after the path."""
    text = Path(path).read_text()
    return parse_qap(text, str(path))
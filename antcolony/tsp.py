"""Symmetric TSP instances in TSPLIB format: distances, reading and tours."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field
from itertools import pairwise
from pathlib import Path
from typing import Callable, Sequence

_PI = 3.14159265358979323846264
_EARTH_RADIUS = 6378.388
_MAXCOORD = 1000000
_DEFAULT_SEED = 1234567
_MIN_DIMENSION = 2
_MAX_DIMENSION = 6000

Matrix = list[list[int]]


class TSPFormatError(ValueError):
    """Raised when a TSPLIB file cannot be parsed."""


@dataclass(frozen=True)
class Point:
    """Coordinates of a node."""

    x: float
    y: float


def round_distance(a: Point, b: Point) -> int:
    """Euclidean distance rounded to the nearest integer (EUC_2D)."""
    xd = a.x - b.x
    yd = a.y - b.y
    return int(math.sqrt(xd * xd + yd * yd) + 0.5)


def ceil_distance(a: Point, b: Point) -> int:
    """Euclidean distance rounded up (CEIL_2D)."""
    xd = a.x - b.x
    yd = a.y - b.y
    return int(math.ceil(math.sqrt(xd * xd + yd * yd)))


def _to_radians(coordinate: float) -> float:
    degrees = float(int(coordinate))
    minutes = coordinate - degrees
    return _PI * (degrees + 5.0 * minutes / 3.0) / 180.0


def geo_distance(a: Point, b: Point) -> int:
    """Geographical distance on an idealised sphere (GEO)."""
    lati, latj = _to_radians(a.x), _to_radians(b.x)
    longi, longj = _to_radians(a.y), _to_radians(b.y)
    q1 = math.cos(longi - longj)
    q2 = math.cos(lati - latj)
    q3 = math.cos(lati + latj)
    return int(
        _EARTH_RADIUS * math.acos(0.5 * ((1.0 + q1) * q2 - (1.0 - q1) * q3)) + 1.0
    )


def att_distance(a: Point, b: Point) -> int:
    """Pseudo-Euclidean distance (ATT)."""
    xd = a.x - b.x
    yd = a.y - b.y
    rij = math.sqrt((xd * xd + yd * yd) / 10.0)
    tij = float(int(rij))
    return int(tij) + 1 if tij < rij else int(tij)


def _i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass(frozen=True)
class ExplicitDistance:
    """Pseudo-random distances generated from a seed (EXPLICIT instances)."""

    seed: int = _DEFAULT_SEED

    @property
    def param(self) -> int:
        return _i32(104 * self.seed + 1)

    @property
    def factor(self) -> float:
        return _MAXCOORD / 2147483648.0

    @staticmethod
    def _key(index: int) -> int:
        return _i32(0x12345672 * index + 1)

    def __call__(self, i: int, j: int) -> int:
        if i == j:
            return 0
        a = self._key(i + 1)
        b = self._key(j + 1)
        param = self.param
        x = _i32(a & b)
        y = _i32(a | b)
        z = param
        x = _i32(x * z)
        y = _i32(y * x)
        z = _i32(z * y)
        z = _i32(z ^ param)
        x = _i32(x * z)
        y = _i32(y * x)
        z = _i32(z * y)
        x = ((a + b) ^ z) & 0x7FFFFFFF
        return int(x * self.factor)


_POINT_DISTANCES: dict[str, Callable[[Point, Point], int]] = {
    "EUC_2D": round_distance,
    "CEIL_2D": ceil_distance,
    "GEO": geo_distance,
    "ATT": att_distance,
}


@dataclass
class TSPInstance:
    """A symmetric TSP instance with its full distance matrix."""

    name: str
    edge_weight_type: str
    nodes: list[Point]
    distance: Matrix
    nn_list: list[list[int]] | None = field(default=None)

    @property
    def n(self) -> int:
        return len(self.distance)

    def compute_nn_lists(self, depth: int) -> list[list[int]]:
        """Store and return, for each node, its ``depth`` nearest neighbours."""
        n = self.n
        nn = min(depth, n - 1)
        lists = []
        for node, row in enumerate(self.distance):
            others = sorted(
                (i for i in range(n) if i != node), key=lambda i: row[i]
            )
            lists.append(others[:nn])
        self.nn_list = lists
        return lists

    def tour_length(self, tour: Sequence[int]) -> int:
        """Length of a closed tour given as ``n + 1`` cities."""
        return sum(self.distance[a][b] for a, b in pairwise(tour[: self.n + 1]))

    def check_solution(self, tour: Sequence[int]) -> bool:
        """Return True if ``tour`` visits every city once and is closed."""
        n = self.n
        cities = list(tour[:n])
        valid = len(cities) == n and sorted(cities) == list(range(n))
        if valid and (len(tour) <= n or tour[0] != tour[n]):
            print(
                "check_solution:error: permutation is not a closed tour.",
                file=sys.stderr,
            )
            valid = False
        if not valid:
            print(
                "check_solution:error: solution_vector: "
                + " ".join(str(c) for c in cities),
                file=sys.stderr,
            )
        return valid

    def heuristic(self, i: int, j: int) -> float:
        """Heuristic desirability of the arc (i, j)."""
        return 1.0 / (self.distance[i][j] + 0.1)


class _Scanner:
    """Whitespace-separated tokens with access to the rest of a line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def token(self) -> str | None:
        text = self._text
        length = len(text)
        pos = self._pos
        while pos < length and text[pos].isspace():
            pos += 1
        if pos >= length:
            self._pos = pos
            return None
        start = pos
        while pos < length and not text[pos].isspace():
            pos += 1
        self._pos = pos
        return text[start:pos]

    def rest_of_line(self) -> str:
        end = self._text.find("\n", self._pos)
        end = len(self._text) if end < 0 else end + 1
        line = self._text[self._pos : end]
        self._pos = end
        return line

    def require(self, what: str) -> str:
        value = self.token()
        if value is None:
            raise TSPFormatError(f"unexpected end of file reading {what}")
        return value


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _seed_from_comment(line: str) -> int | None:
    index = line.find("seed")
    if index < 0:
        return None
    parts = [part for part in line[index:].split("=") if part]
    if len(parts) < 2:
        return None
    return _atoi(parts[1])


def _parse_dimension(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise TSPFormatError(f"invalid DIMENSION value `{value}'") from None
    if not _MIN_DIMENSION < n < _MAX_DIMENSION:
        raise TSPFormatError(f"DIMENSION {n} out of range")
    return n


def _check_type(value: str) -> None:
    if value != "TSP":
        raise TSPFormatError("Not a TSP instance in TSPLIB format")


def _read_points(scanner: _Scanner, n: int, explicit: bool) -> list[Point]:
    points = []
    for i in range(n):
        fields = [scanner.token() for _ in range(3)]
        try:
            if None in fields:
                raise ValueError
            int(fields[0])
            points.append(Point(float(fields[1]), float(fields[2])))
        except ValueError:
            if explicit:
                return [Point(0.0, 0.0)] * n
            raise TSPFormatError(f"error reading coordinates of node {i}") from None
    return points


def parse_tsplib(text: str) -> TSPInstance:
    """Parse a TSPLIB instance and compute its distance matrix."""
    scanner = _Scanner(text)
    name = ""
    edge_weight_type = ""
    seed = _DEFAULT_SEED
    n: int | None = None
    explicit: ExplicitDistance | None = None
    point_distance: Callable[[Point, Point], int] | None = None

    while True:
        keyword = scanner.token()
        if keyword is None:
            raise TSPFormatError(
                "Some error occurred finding start of coordinates from tsp file"
            )
        if keyword in ("NODE_COORD_SECTION", "EDGE_WEIGHT_SECTION"):
            break
        if keyword == "NAME":
            scanner.require("NAME")
            name = scanner.require("NAME")
        elif keyword == "NAME:":
            name = scanner.require("NAME")
        elif keyword in ("COMMENT", "COMMENT:"):
            found = _seed_from_comment(scanner.rest_of_line())
            if found is not None:
                seed = found
        elif keyword == "TYPE":
            scanner.require("TYPE")
            _check_type(scanner.require("TYPE"))
        elif keyword == "TYPE:":
            _check_type(scanner.require("TYPE"))
        elif keyword == "DIMENSION":
            scanner.require("DIMENSION")
            n = _parse_dimension(scanner.require("DIMENSION"))
        elif keyword == "DIMENSION:":
            n = _parse_dimension(scanner.require("DIMENSION"))
        elif keyword in ("DISPLAY_DATA_TYPE", "DISPLAY_DATA_TYPE:"):
            scanner.rest_of_line()
        elif keyword in ("EDGE_WEIGHT_TYPE", "EDGE_WEIGHT_TYPE:"):
            if keyword == "EDGE_WEIGHT_TYPE":
                scanner.require("EDGE_WEIGHT_TYPE")
            edge_weight_type = scanner.require("EDGE_WEIGHT_TYPE")
            if edge_weight_type == "EXPLICIT":
                explicit = ExplicitDistance(seed)
                point_distance = None
            elif edge_weight_type in _POINT_DISTANCES:
                point_distance = _POINT_DISTANCES[edge_weight_type]
                explicit = None
            else:
                raise TSPFormatError(
                    f"EDGE_WEIGHT_TYPE {edge_weight_type} not implemented"
                )

    if n is None:
        raise TSPFormatError("DIMENSION missing from tsp file")
    if explicit is None and point_distance is None:
        raise TSPFormatError("EDGE_WEIGHT_TYPE missing from tsp file")

    nodes = _read_points(scanner, n, explicit is not None)
    if explicit is not None:
        distance = [[explicit(i, j) for j in range(n)] for i in range(n)]
    else:
        distance = [[point_distance(a, b) for b in nodes] for a in nodes]
    return TSPInstance(
        name=name, edge_weight_type=edge_weight_type, nodes=nodes, distance=distance
    )


def read_tsplib(path) -> TSPInstance:
    """Read a TSPLIB instance file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise TSPFormatError(f"cannot open instance file {path}") from exc
    return parse_tsplib(text)
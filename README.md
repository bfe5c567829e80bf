# antcolony

Building blocks for Ant Colony Optimization (ACO) on two classic
combinatorial problems:

* the symmetric **Traveling Salesman Problem**, read from TSPLIB files, and
* the **Quadratic Assignment Problem**, read from QAPLIB-style files.

It is pure Python with no third-party dependencies and needs Python 3.10 or
later.

## Modules

| Module | What it holds |
| --- | --- |
| `antcolony.tsp` | TSPLIB reader (`parse_tsplib`, `read_tsplib`), the distance functions `round_distance`, `ceil_distance`, `geo_distance`, `att_distance`, the seeded `ExplicitDistance` generator, `Point`, and `TSPInstance` with `tour_length`, `check_solution`, `compute_nn_lists` and `heuristic` |
| `antcolony.qap` | QAP reader (`parse_qap`, `read_qap`), matrix helpers `is_symmetric`, `has_null_diagonal`, `make_symmetric`, and `QAPInstance` with `objective` and `check_solution` |
| `antcolony.adaptation` | Schedules that vary the number of ants, beta, rho and q0 during a run: `Variation`, `ParameterSchedule`, `ParameterAdapter` and `clamp` |
| `antcolony.schedule` | Node lambda-branching factor and convergence factor for both problems, the MAX-MIN Ant System update schedules, and the choice of evaporation scheme |
| `antcolony.report` | Per-try results (`TryResult`), run summaries (`summarize`, `format_summary`, `RunSummary`), `population_statistics` and `tour_sum_is_valid` |

## Reading a TSP instance

```python
from antcolony.tsp import parse_tsplib

text = """NAME: square
TYPE: TSP
DIMENSION: 4
EDGE_WEIGHT_TYPE: EUC_2D
NODE_COORD_SECTION
1 0 0
2 0 10
3 10 10
4 10 0
EOF
"""
instance = parse_tsplib(text)
tour = [0, 1, 2, 3, 0]                  # a closed tour repeats its first city
print(instance.tour_length(tour))       # 40
print(instance.check_solution(tour))    # True
print(instance.compute_nn_lists(2))     # two nearest neighbours of each city
```

Supported edge weight types are `EUC_2D`, `CEIL_2D`, `GEO`, `ATT` and
`EXPLICIT`. For `EXPLICIT`, distances are generated pseudo-randomly from a
`seed=<number>` found in the instance's `COMMENT` line (1234567 if there is
none). `DIMENSION` must lie strictly between 2 and 6000. Malformed files, an
unknown edge weight type, or a `TYPE` other than `TSP` raise `TSPFormatError`.

The heuristic desirability of an arc is `1 / (distance + 0.1)`.

## Reading a QAP instance

A QAP file holds the problem size on its first line (optionally followed by a
best-known value, which is ignored), then the distance matrix and the flow
matrix:

```python
from antcolony.qap import parse_qap

text = """3
0 1 2
1 0 3
2 3 0

0 5 2
5 0 3
2 3 0
"""
instance = parse_qap(text, "tiny")
print(instance.objective([2, 0, 1]))    # 46
```

`objective(p)` is the sum over all `i, j` of `distance[i][j] * flow[p[i]][p[j]]`.
If exactly one matrix is symmetric, it is recorded in `halve_objective` and
the objective is halved; if in addition one of the matrices has a null
diagonal, the asymmetric matrix is replaced by M + Mᵀ, so the value of a
solution is unchanged. Malformed files raise `QAPFormatError`.

## Parameter adaptation

```python
from antcolony.adaptation import ParameterAdapter, ParameterSchedule, Variation

adapter = ParameterAdapter(
    n_ants=ParameterSchedule(25, 10, Variation.DELTA, delta=0.5),
    beta=ParameterSchedule(2.0),
    rho=ParameterSchedule(0.5, 0.1, Variation.SWITCH, switch=100),
    q0=ParameterSchedule(0.0),
)
adapter.init()
adapter.next_iteration(1)
adapter.next_iteration(2)
print(adapter.n_ants.value)             # 24
```

With `Variation.DELTA` a value moves by `delta` per iteration towards `end`
and is clamped between `start` and `end`; a fractional change in the number
of ants accumulates until it amounts to whole ants. With `Variation.SWITCH`
the value jumps to `end` at the iteration given by `switch`.

## Pheromone schedules

`antcolony.schedule` provides:

* `tsp_node_branching` and `qap_node_branching`: the average
  lambda-branching factor of a pheromone matrix (over the candidate lists for
  the TSP, halved; over whole rows for the QAP);
* `tsp_convergence_factor` and `qap_convergence_factor`: 0 far from
  convergence, 1 when every trail sits at `trail_min` or `trail_max`;
* `tsp_mmas_update_target` and `qap_mmas_update_target`, returning an
  `UpdateTarget` (iteration-best, restart-best or best-so-far ant);
* `tsp_next_u_gb` and `qap_next_u_gb`: how often the restart-best ant is used
  in the next iteration;
* `evaporation_mode`, returning an `EvaporationMode`.

## Run statistics

```python
from antcolony.report import TryResult, format_summary, summarize

results = [
    TryResult(best_length=430, found_at_iteration=120, time_best_found=1.5, time_total=10.0),
    TryResult(best_length=426, found_at_iteration=310, time_best_found=4.2, time_total=10.0),
]
summary = summarize(results)
print(format_summary(summary, optimal=426))
```

Standard deviations are sample deviations and are `nan` for a single try.
`population_statistics` summarises one population of ants from their tour
lengths and pairwise distances, and `tour_sum_is_valid` is a quick
feasibility check on a tour.

## What the package does not do

The package holds the pieces listed above and nothing more. It has no
command-line program, no ant or colony objects that construct solutions, no
pheromone matrix with deposit and evaporation updates, no local search, and
no driver that runs a complete search with default parameter settings or
writes report files. Those have to be assembled by the caller from the
functions here.

## Running the tests

The tests use pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```
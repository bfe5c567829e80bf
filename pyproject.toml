[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antcolony"
version = "0.996.0"
description = "Building blocks for Ant Colony Optimization on the TSP and the QAP: instance readers, pheromone schedules, parameter adaptation and run statistics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ant colony optimization",
    "aco",
    "metaheuristics",
    "traveling salesman problem",
    "tsp",
    "tsplib",
    "quadratic assignment problem",
    "qap",
    "max-min ant system",
    "combinatorial optimization",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["antcolony"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

"""Building blocks for Ant Colony Optimization on the TSP and the QAP."""

__version__ = "0.996.0"

__all__ = [
    "adaptation",
    "qap",
    "report",
    "schedule",
    "tsp",
]
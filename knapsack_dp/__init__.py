"""0/1 knapsack solvers with companion search, linked list, recursion and sparse matrix utilities."""

from .dynamic_programming.basic.knapsack import KnapsackTable, TableKnapsack, solve_table
from .dynamic_programming.basic.rolling_knapsack import RollingKnapsack, solve_rolling
from .errors import (
    InvalidInput,
    KnapsackError,
    QueueEmpty,
    QueueFull,
    SolveCancelled,
    SparseFormatError,
)

__all__ = [
    "InvalidInput",
    "KnapsackError",
    "KnapsackTable",
    "QueueEmpty",
    "QueueFull",
    "RollingKnapsack",
    "SolveCancelled",
    "SparseFormatError",
    "TableKnapsack",
    "solve_rolling",
    "solve_table",
]

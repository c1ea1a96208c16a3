"""Classic data structures and algorithms: searching, sorting, min/max,
fractional knapsack, bounded containers, a max-heap, graph traversal and
minimum spanning trees."""

__version__ = "0.1.0"
__all__ = [
    "containers",
    "graphs",
    "heaps",
    "knapsack",
    "minmax",
    "searching",
    "sorting",
    "spanning",
]
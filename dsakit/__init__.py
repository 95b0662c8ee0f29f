"""Classic data structures and algorithms: stacks, queues, linked lists,
polynomials, trees, graphs, sorting, searching and expression evaluation."""

__version__ = "0.1.0"

__all__ = [
    "stacks",
    "expressions",
    "queues",
    "searching",
    "inversions",
    "sorting",
    "linked_list",
    "circular_list",
    "polynomial",
    "trees",
    "graphs",
]
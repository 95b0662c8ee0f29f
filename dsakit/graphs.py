"""Graph traversal over adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def depth_first_search(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in depth-first visiting order from ``start``.

    ``adjacency[v][i] == 1`` means an edge from ``v`` to ``i``; neighbours
    are tried in ascending index order.
    """
    count = len(adjacency)
    for row in adjacency:
        if len(row) != count:
            raise ValueError("adjacency matrix must be square")
    if not 0 <= start < count:
        raise IndexError(f"start vertex {start} out of range 0..{count - 1}")
    visited = [False] * count
    visited[start] = True
    order = [start]
    pending: list[tuple[int, Iterator[int]]] = [(start, iter(range(count)))]
    while pending:
        vertex, candidates = pending[-1]
        for neighbour in candidates:
            if not visited[neighbour] and adjacency[vertex][neighbour] == 1:
                visited[neighbour] = True
                order.append(neighbour)
                pending.append((neighbour, iter(range(count))))
                break
        else:
            pending.pop()
    return order
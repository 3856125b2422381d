"""
Topological ordering of directed graphs.

Graphs are adjacency mappings {node: iterable of successors}. A node that only
ever appears as a successor is still part of the graph. Both sorts are O(V + E).
"""

from collections import deque

from ..errors import CycleError


def _normalize(graph) -> dict:
    adj = {}
    for node, succs in graph.items():
        adj.setdefault(node, [])
        for succ in succs:
            adj[node].append(succ)
            adj.setdefault(succ, [])
    return adj


def topological_sort_kahn(graph) -> list:
    """Kahn's algorithm: repeatedly emit nodes with no remaining in-edges."""
    adj = _normalize(graph)
    indegree = dict.fromkeys(adj, 0)
    for succs in adj.values():
        for succ in succs:
            indegree[succ] += 1

    queue = deque(node for node, deg in indegree.items() if deg == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for succ in adj[node]:
            indegree[succ] -= 1
            if indegree[succ] == 0:
                queue.append(succ)

    if len(order) != len(adj):
        raise CycleError(node for node, deg in indegree.items() if deg > 0)
    return order


WHITE, GRAY, BLACK = 0, 1, 2


def topological_sort_dfs(graph) -> list:
    """Reverse post-order DFS with white/gray/black marking."""
    adj = _normalize(graph)
    color = dict.fromkeys(adj, WHITE)
    order = []

    for start in adj:
        if color[start] != WHITE:
            continue
        color[start] = GRAY
        stack = [(start, iter(adj[start]))]
        while stack:
            node, succs = stack[-1]
            for succ in succs:
                if color[succ] == GRAY:
                    cycle = [n for n, _ in stack]
                    raise CycleError(cycle[cycle.index(succ):])
                if color[succ] == WHITE:
                    color[succ] = GRAY
                    stack.append((succ, iter(adj[succ])))
                    break
            else:
                stack.pop()
                color[node] = BLACK
                order.append(node)

    order.reverse()
    return order


def _course_graph(num_courses: int, prerequisites) -> dict:
    graph = {course: [] for course in range(num_courses)}
    for course, before in prerequisites:
        graph[before].append(course)
    return graph


def can_finish(num_courses: int, prerequisites) -> bool:
    """Course schedule: [a, b] means b must be taken before a."""
    return bool(find_order(num_courses, prerequisites)) or num_courses == 0


def find_order(num_courses: int, prerequisites) -> list[int]:
    try:
        return topological_sort_kahn(_course_graph(num_courses, prerequisites))
    except CycleError:
        return []

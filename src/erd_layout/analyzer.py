from __future__ import annotations

from .types import Node, Edge, GraphAnalysis

# ============================================================================
# Graph analysis -- connectivity of the table graph
#
# Foreign keys are directed, but for layout purposes a reference pulls both
# tables together equally, so adjacency is symmetric.
# ============================================================================


def analyze(nodes: list[Node], edges: list[Edge]) -> GraphAnalysis:
    """Build adjacency and degree maps and classify junction and hub tables.

    Edges that reference unknown node ids are ignored. A self reference
    (A -> A) makes a table its own neighbour.
    """
    adjacency: dict[str, set[str]] = {node.id: set() for node in nodes}

    for edge in edges:
        if edge.source not in adjacency or edge.target not in adjacency:
            continue
        adjacency[edge.source].add(edge.target)
        adjacency[edge.target].add(edge.source)

    degree = {node_id: len(neighbours) for node_id, neighbours in adjacency.items()}

    # Heuristic only: no column inspection is done
    junctions = {node_id for node_id, d in degree.items() if d >= 2}

    hubs: set[str] = set()
    if degree:
        mean_degree = sum(degree.values()) / len(degree)
        hubs = {node_id for node_id, d in degree.items() if d > mean_degree}

    return GraphAnalysis(
        adjacency=adjacency,
        degree=degree,
        junctions=junctions,
        hubs=hubs,
    )

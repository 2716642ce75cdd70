from __future__ import annotations

from dataclasses import dataclass, field

# ============================================================================
# Layout input -- table boxes and foreign-key references
# ============================================================================


@dataclass(slots=True)
class Node:
    """A table box. Width/height are the rendered size and are never changed."""

    id: str
    width: float
    height: float


@dataclass(slots=True)
class Edge:
    """A foreign-key reference from `source` to `target` (node ids)."""

    source: str
    target: str


# ============================================================================
# Layout output -- positioned boxes and routed connectors
# ============================================================================


@dataclass(slots=True)
class Point:
    x: float
    y: float


@dataclass(slots=True)
class PositionedNode:
    id: str
    # Top-left corner
    x: float
    y: float


@dataclass(slots=True)
class RoutedEdge:
    source: str
    target: str
    # Sampled curve, source anchor first and target anchor last
    path: list[tuple[float, float]] = field(default_factory=list)


@dataclass(slots=True)
class LayoutResult:
    nodes: list[PositionedNode] = field(default_factory=list)
    edges: list[RoutedEdge] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain-data form consumed by the diagram canvas."""
        return {
            "nodes": [{"id": n.id, "x": n.x, "y": n.y} for n in self.nodes],
            "edges": [
                {
                    "from": e.source,
                    "to": e.target,
                    "path": [[px, py] for (px, py) in e.path],
                }
                for e in self.edges
            ],
        }


# ============================================================================
# Simulation state -- lives for one layout run only
# ============================================================================


@dataclass(slots=True)
class Particle:
    id: str
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0


@dataclass(slots=True)
class GraphAnalysis:
    # Undirected neighbour sets keyed by node id
    adjacency: dict[str, set[str]]
    degree: dict[str, int]
    # degree >= 2, likely many-to-many bridge tables
    junctions: set[str]
    # degree above the mean
    hubs: set[str]


# ============================================================================
# Layout options -- user-facing configuration
# ============================================================================


@dataclass(slots=True)
class LayoutOptions:
    seed: int | None = None
    # Force simulation
    repulsion: float | None = None
    attraction: float | None = None
    min_distance: float | None = None
    center_force: float | None = None
    damping: float | None = None
    iterations: int | None = None
    ideal_distance: float | None = None
    # Initial grid
    base_spacing: float | None = None
    start_padding: float | None = None
    jitter: float | None = None
    # Post-processing
    grid_spacing: float | None = None
    padding: float | None = None
    # Connector curves
    curve_segments: int | None = None
    # Layered layout
    node_spacing: float | None = None
    layer_spacing: float | None = None

from __future__ import annotations

import logging

from grandalf.graphs import Vertex, Edge as GEdge, Graph
from grandalf.layouts import SugiyamaLayout

from .types import Node, Edge, LayoutOptions, LayoutResult, Particle
from .settings import merge_options
from .postprocess import snap_to_grid, normalize
from .paths import center_to_top_left
from .layout import finish_layout, validate_nodes

logger = logging.getLogger("erd_layout.layered")

# ============================================================================
# Layered (Sugiyama) layout
#
# Uses grandalf to rank tables left-to-right along their foreign keys:
# referencing tables sit left of the tables they reference. Each connected
# component is laid out on its own and components are stacked top to bottom.
#
# grandalf works top-down, so each vertex view is transposed (w <- height,
# h <- width) and the resulting x/y are swapped back.
# ============================================================================


class _VertexView:
    """Minimal view object required by grandalf's SugiyamaLayout."""

    def __init__(self, w: float = 60, h: float = 36) -> None:
        self.w = w
        self.h = h
        # xy is set by the layout engine (center coordinates)
        self.xy = (0.0, 0.0)


def layout_layered(
    nodes: list[Node],
    edges: list[Edge],
    options: LayoutOptions | None = None,
) -> LayoutResult:
    """Lay out table boxes in left-to-right layers.

    Returns positions snapped and padded like the force layout, with
    connectors routed the same way.
    """
    if len(nodes) == 0:
        return LayoutResult()

    validate_nodes(nodes)
    opts = merge_options(options)

    # 1. Build grandalf graph
    vertices: dict[str, Vertex] = {}
    for node in nodes:
        v = Vertex(node.id)
        v.view = _VertexView(node.height, node.width)
        vertices[node.id] = v

    # Ranking only needs one edge per table pair; self references and
    # repeated pairs are still routed below.
    seen_pairs: set[frozenset[str]] = set()
    graph_edges: list[GEdge] = []
    for edge in edges:
        src_v = vertices.get(edge.source)
        tgt_v = vertices.get(edge.target)
        if src_v is None or tgt_v is None or edge.source == edge.target:
            continue
        pair = frozenset((edge.source, edge.target))
        if pair in seen_pairs:
            continue
        seen_pairs.add(pair)
        graph_edges.append(GEdge(src_v, tgt_v))

    g = Graph(list(vertices.values()), graph_edges)

    # 2. Run Sugiyama per component and stack the components
    particles: list[Particle] = []
    offset_y = 0.0
    for component in g.C:
        try:
            sug = SugiyamaLayout(component)
            sug.xspace = opts["node_spacing"]
            sug.yspace = opts["layer_spacing"]
            sug.init_all()
            sug.draw()
        except Exception as err:
            raise RuntimeError(f"Grandalf layout failed (layered ERD): {err}") from err

        placed: list[Particle] = []
        for v in component.sV:
            # Left-to-right: grandalf's y-axis is our x-axis
            cx, cy = v.view.xy[1], v.view.xy[0]
            top_left = center_to_top_left(cx, cy, v.view.h, v.view.w)
            placed.append(Particle(id=v.data, x=top_left.x, y=top_left.y))

        min_x = min(p.x for p in placed)
        min_y = min(p.y for p in placed)
        max_y = max(p.y + vertices[p.id].view.w for p in placed)
        for p in placed:
            p.x -= min_x
            p.y = p.y - min_y + offset_y
        offset_y += (max_y - min_y) + opts["layer_spacing"]
        particles.extend(placed)

    logger.debug("Layered %d tables in %d components", len(particles), len(g.C))

    # Keep input order in the output
    order = {node.id: i for i, node in enumerate(nodes)}
    particles.sort(key=lambda p: order[p.id])

    # 3. Post-process and route, same as the force layout
    particles = snap_to_grid(particles, opts["grid_spacing"])
    particles = normalize(particles, opts["padding"])
    return finish_layout(nodes, edges, particles, opts)

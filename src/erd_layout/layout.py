from __future__ import annotations

import logging
import math
import random
from typing import Callable

from .types import (
    Node,
    Edge,
    LayoutOptions,
    LayoutResult,
    Particle,
    PositionedNode,
)
from .settings import merge_options
from .analyzer import analyze
from .placement import place
from .simulation import simulate
from .postprocess import snap_to_grid, normalize
from .paths import compute_paths

logger = logging.getLogger("erd_layout.layout")

# ============================================================================
# Force layout pipeline
#
#   analyze -> place -> simulate -> snap/normalize -> route connectors
#
# Pure: every call builds its own collections and random state is only
# what the caller passes in (or a generator seeded from options.seed).
# ============================================================================


def layout_schema(
    nodes: list[Node],
    edges: list[Edge],
    options: LayoutOptions | None = None,
    *,
    rng: random.Random | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> LayoutResult:
    """Lay out table boxes with a force-directed simulation.

    Returns one position per node and one routed path per edge.
    """
    if len(nodes) == 0:
        return LayoutResult()

    validate_nodes(nodes)
    opts = merge_options(options)
    if rng is None:
        rng = random.Random(opts["seed"])

    analysis = analyze(nodes, edges)
    logger.debug(
        "Analyzed %d tables: %d junctions, %d hubs",
        len(nodes),
        len(analysis.junctions),
        len(analysis.hubs),
    )

    particles = place(nodes, rng, opts)
    particles = simulate(particles, edges, opts, should_cancel=should_cancel)
    particles = snap_to_grid(particles, opts["grid_spacing"])
    particles = normalize(particles, opts["padding"])

    return finish_layout(nodes, edges, particles, opts)


def finish_layout(
    nodes: list[Node],
    edges: list[Edge],
    particles: list[Particle],
    opts: dict,
) -> LayoutResult:
    """Route connectors against final positions and build the result."""
    positions = [PositionedNode(id=p.id, x=p.x, y=p.y) for p in particles]
    dimensions = {node.id: (node.width, node.height) for node in nodes}
    routed = compute_paths(edges, positions, dimensions, opts)

    logger.info("Laid out %d tables and %d relationships", len(positions), len(routed))
    return LayoutResult(nodes=positions, edges=routed)


def validate_nodes(nodes: list[Node]) -> None:
    """Reject input the layout cannot place: duplicate ids or bad box sizes."""
    seen: set[str] = set()
    for node in nodes:
        if node.id in seen:
            raise ValueError(f"Duplicate node id: {node.id!r}")
        seen.add(node.id)

        for name, value in (("width", node.width), ("height", node.height)):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(
                    f"Node {node.id!r} has invalid {name} {value!r}; expected a positive finite number"
                )

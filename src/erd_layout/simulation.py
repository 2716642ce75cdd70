from __future__ import annotations

import logging
import math
from typing import Callable

from .types import Edge, Particle

logger = logging.getLogger("erd_layout.simulation")

# ============================================================================
# Force-directed simulation
#
# Every iteration:
#   1. reset accumulated forces
#   2. inverse-square repulsion between every pair closer than 3 x min_distance
#   3. spring attraction along each edge longer than ideal_distance
#   4. weak pull toward the centroid of the initial placement
#   5. damped explicit Euler step (unit timestep)
#
# The iteration count is fixed; there is no convergence check.
# ============================================================================


def simulate(
    particles: list[Particle],
    edges: list[Edge],
    opts: dict,
    should_cancel: Callable[[], bool] | None = None,
) -> list[Particle]:
    """Run the simulation on copies of `particles` and return them.

    `should_cancel` is polled between iterations; when it returns True the
    current state is returned as-is.
    """
    state = [Particle(id=p.id, x=p.x, y=p.y, vx=p.vx, vy=p.vy) for p in particles]
    n = len(state)
    if n == 0:
        return state

    index_of = {p.id: i for i, p in enumerate(state)}

    # Resolve edge endpoints once; unknown ids drop out here
    springs: list[tuple[int, int]] = []
    for edge in edges:
        i = index_of.get(edge.source)
        j = index_of.get(edge.target)
        if i is None or j is None:
            continue
        springs.append((i, j))

    repulsion = opts["repulsion"]
    attraction = opts["attraction"]
    cutoff = opts["min_distance"] * 3
    center_force = opts["center_force"]
    damping = opts["damping"]
    ideal = opts["ideal_distance"]
    epsilon = opts["epsilon"]
    iterations = int(opts["iterations"])

    # Fixed at the initial placement for the whole run
    center_x = sum(p.x for p in state) / n
    center_y = sum(p.y for p in state) / n

    completed = 0
    for _ in range(iterations):
        if should_cancel is not None and should_cancel():
            logger.debug("Simulation cancelled after %d/%d iterations", completed, iterations)
            break

        fx = [0.0] * n
        fy = [0.0] * n

        # Repulsion, each unordered pair once
        for i in range(n):
            p1 = state[i]
            for j in range(i + 1, n):
                p2 = state[j]
                dx = p2.x - p1.x
                dy = p2.y - p1.y
                dist_sq = dx * dx + dy * dy + epsilon
                dist = math.sqrt(dist_sq)

                if dist < cutoff:
                    force = repulsion / dist_sq
                    rx = dx / dist * force
                    ry = dy / dist * force
                    fx[i] -= rx
                    fy[i] -= ry
                    fx[j] += rx
                    fy[j] += ry

        # Attraction, only beyond the ideal length
        for i, j in springs:
            p1 = state[i]
            p2 = state[j]
            dx = p2.x - p1.x
            dy = p2.y - p1.y
            dist = math.sqrt(dx * dx + dy * dy)

            if dist > ideal:
                force = (dist - ideal) * attraction
                ax = dx / dist * force
                ay = dy / dist * force
                fx[i] += ax
                fy[i] += ay
                fx[j] -= ax
                fy[j] -= ay

        for i, p in enumerate(state):
            # Centering
            fx[i] += (center_x - p.x) * center_force
            fy[i] += (center_y - p.y) * center_force

            # Integration
            p.vx = (p.vx + fx[i]) * damping
            p.vy = (p.vy + fy[i]) * damping
            p.x += p.vx
            p.y += p.vy

        completed += 1

    logger.debug(
        "Simulated %d particles, %d springs, %d iterations", n, len(springs), completed
    )
    return state

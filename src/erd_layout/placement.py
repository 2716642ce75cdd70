from __future__ import annotations

import math
import random

from .types import Node, Particle


def place(nodes: list[Node], rng: random.Random, opts: dict) -> list[Particle]:
    """Seed every table on a jittered, roughly square grid.

    Junction and hub classification is deliberately not consulted here;
    every table gets the same treatment. The jitter breaks perfect
    alignment so the simulation does not settle into axis-aligned minima.
    """
    if not nodes:
        return []

    columns = math.ceil(math.sqrt(len(nodes)))
    spacing = opts["base_spacing"]
    start = opts["start_padding"]
    jitter = opts["jitter"]

    particles: list[Particle] = []
    for index, node in enumerate(nodes):
        col = index % columns
        row = index // columns

        jitter_x = (rng.random() - 0.5) * 2 * jitter
        jitter_y = (rng.random() - 0.5) * 2 * jitter

        particles.append(
            Particle(
                id=node.id,
                x=start + col * spacing + jitter_x,
                y=start + row * spacing + jitter_y,
            )
        )

    return particles

from __future__ import annotations

from .types import Particle


def snap_to_grid(particles: list[Particle], grid: float) -> list[Particle]:
    """Round each coordinate to the nearest multiple of `grid`."""
    return [
        Particle(
            id=p.id,
            x=float(round(p.x / grid) * grid),
            y=float(round(p.y / grid) * grid),
            vx=p.vx,
            vy=p.vy,
        )
        for p in particles
    ]


def normalize(particles: list[Particle], padding: float) -> list[Particle]:
    """Translate everything so the minimum x and y sit at `padding`."""
    if not particles:
        return particles

    min_x = min(p.x for p in particles)
    min_y = min(p.y for p in particles)

    return [
        Particle(
            id=p.id,
            x=p.x - min_x + padding,
            y=p.y - min_y + padding,
            vx=p.vx,
            vy=p.vy,
        )
        for p in particles
    ]

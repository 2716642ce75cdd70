from __future__ import annotations

from dataclasses import fields

from .types import LayoutOptions

# ============================================================================
# Layout defaults -- the tuning levers for layout "feel"
#
# Larger repulsion / min_distance spread tables out; larger attraction /
# center_force pull the diagram together. Forces are tuned for a unit
# timestep, so changing damping or iterations changes how far the
# simulation travels, not just how long it runs.
# ============================================================================

LAYOUT_DEFAULTS = {
    "seed": None,
    # Force simulation
    "repulsion": 80000.0,
    "attraction": 0.03,
    "min_distance": 320.0,
    "center_force": 0.005,
    "damping": 0.9,
    "iterations": 400,
    "ideal_distance": 300.0,
    # Added to squared distances so coincident tables never divide by zero
    "epsilon": 0.01,
    # Initial grid
    "base_spacing": 350.0,
    "start_padding": 100.0,
    "jitter": 30.0,
    # Post-processing
    "grid_spacing": 40.0,
    "padding": 80.0,
    # Connector curves
    "curve_segments": 20,
    "curve_factor": 0.3,
    "curve_min_offset": 40.0,
    "curve_max_offset": 120.0,
    # Layered layout
    "node_spacing": 80.0,
    "layer_spacing": 100.0,
}


def merge_options(options: LayoutOptions | None) -> dict:
    """Overlay the options that are set on a copy of LAYOUT_DEFAULTS."""
    opts = dict(LAYOUT_DEFAULTS)
    if options:
        for f in fields(options):
            value = getattr(options, f.name)
            if value is not None:
                opts[f.name] = value
    return opts

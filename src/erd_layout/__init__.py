"""erd-layout -- automatic entity-relationship diagram layout."""

from __future__ import annotations

from .types import (
    Node,
    Edge,
    Point,
    PositionedNode,
    RoutedEdge,
    LayoutResult,
    LayoutOptions,
)
from .settings import LAYOUT_DEFAULTS, merge_options
from .analyzer import analyze
from .layout import layout_schema
from .layered import layout_layered
from .schema import Column, Table, schema_to_graph, infer_foreign_keys, table_size

__all__ = [
    "layout_schema",
    "layout_layered",
    "layout_tables",
    "analyze",
    "schema_to_graph",
    "infer_foreign_keys",
    "table_size",
    "merge_options",
    "LAYOUT_DEFAULTS",
    "Node",
    "Edge",
    "Point",
    "PositionedNode",
    "RoutedEdge",
    "LayoutResult",
    "LayoutOptions",
    "Column",
    "Table",
]

ALGORITHMS = ("force", "layered")


def layout_tables(
    tables: list[Table],
    relations: list[tuple[str, str]] | None = None,
    options: LayoutOptions | None = None,
    algorithm: str = "force",
) -> LayoutResult:
    """Size tables, collect their relations and lay them out.

    `algorithm` is "force" (default) or "layered".
    """
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown layout algorithm {algorithm!r}; expected one of {ALGORITHMS}")

    nodes, edges = schema_to_graph(tables, relations)

    if algorithm == "layered":
        return layout_layered(nodes, edges, options)
    return layout_schema(nodes, edges, options)

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .types import Node, Edge

logger = logging.getLogger("erd_layout.schema")

# ============================================================================
# Schema adapter
#
# Turns table descriptions from the schema browser into layout nodes and
# edges. Box sizes follow the table card: fixed width, one row per column
# under a header.
# ============================================================================

TABLE_WIDTH = 240
TABLE_HEADER_HEIGHT = 36
TABLE_ROW_HEIGHT = 28


@dataclass(slots=True)
class Column:
    """A single column of a table."""

    name: str
    # Database type name (integer, varchar, ...)
    data_type: str
    nullable: bool = True


@dataclass(slots=True)
class Table:
    """A table as reported by the schema browser."""

    name: str
    schema: str = "public"
    columns: list[Column] = field(default_factory=list)


def table_node_id(table: Table) -> str:
    return f"table-{table.schema or 'public'}-{table.name}"


def table_size(table: Table) -> tuple[float, float]:
    """(width, height) of the rendered table card."""
    return (TABLE_WIDTH, TABLE_HEADER_HEIGHT + len(table.columns) * TABLE_ROW_HEIGHT)


def _find_referenced_table(stem: str, tables: list[Table]) -> Table | None:
    # Accept exact, plural and singular spellings of the stem
    candidates = (stem, stem + "s", stem[:-1])
    for table in tables:
        if table.name.lower() in candidates:
            return table
    return None


def infer_foreign_keys(tables: list[Table]) -> list[Edge]:
    """Guess foreign keys from `<table>_id` column names.

    A column counts when it ends in `_id`, is not `id` itself and is not the
    table's own `<table>_id`. The referenced table is the first whose name
    matches the stem, its plural or its singular.
    """
    edges: list[Edge] = []
    for table in tables:
        own_key = table.name.lower() + "_id"
        for col in table.columns:
            col_name = col.name.lower()
            if not col_name.endswith("_id") or col_name == "id" or col_name == own_key:
                continue

            stem = col_name.removesuffix("_id")
            if not stem:
                continue
            target = _find_referenced_table(stem, tables)
            if target is None:
                continue

            edges.append(Edge(source=table_node_id(table), target=table_node_id(target)))

    logger.debug("Inferred %d foreign keys across %d tables", len(edges), len(tables))
    return edges


def schema_to_graph(
    tables: list[Table],
    relations: list[tuple[str, str]] | None = None,
) -> tuple[list[Node], list[Edge]]:
    """Build layout input from tables.

    `relations` are (from_table, to_table) name pairs; when given they
    replace foreign-key inference. Pairs naming unknown tables are kept with
    the raw name as id so the layout can route them as placeholders.
    """
    nodes: list[Node] = []
    ids_by_name: dict[str, str] = {}
    for table in tables:
        node_id = table_node_id(table)
        width, height = table_size(table)
        nodes.append(Node(id=node_id, width=width, height=height))
        ids_by_name.setdefault(table.name, node_id)

    if relations is None:
        return nodes, infer_foreign_keys(tables)

    edges = [
        Edge(source=ids_by_name.get(src, src), target=ids_by_name.get(tgt, tgt))
        for (src, tgt) in relations
    ]
    return nodes, edges

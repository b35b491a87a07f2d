"""
Dialect-aware insert-or-update statements.

Translation rows are keyed by (content id, language code). Writing them
with a single ``INSERT ... ON CONFLICT DO UPDATE`` keeps the uniqueness
constraint intact even when two fan-outs for the same item overlap.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.sql.dml import Insert

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def build_upsert(
    dialect_name: str,
    table: Table,
    values: Mapping[str, Any],
    conflict_columns: Sequence[str],
    update_columns: Sequence[str],
) -> Insert:
    """
    Build an atomic upsert statement for ``table``.

    Args:
        dialect_name: Name of the bound dialect ("postgresql" or "sqlite").
        table: Target table.
        values: Column values for the inserted row.
        conflict_columns: Columns of the unique constraint to conflict on.
        update_columns: Columns overwritten from the proposed row on conflict.

    Returns:
        Executable insert statement.

    Raises:
        ValueError: If the dialect has no ON CONFLICT support here.
    """
    insert_factory = _DIALECT_INSERTS.get(dialect_name)
    if insert_factory is None:
        raise ValueError(f"Upsert is not supported for dialect {dialect_name!r}")

    stmt = insert_factory(table).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=list(conflict_columns),
        set_={column: stmt.excluded[column] for column in update_columns},
    )

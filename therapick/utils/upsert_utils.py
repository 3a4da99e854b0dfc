# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert(db: Session, model, keys: dict, insert_values: dict, update_values: dict):
    """
    INSERT ... ON CONFLICT (keys) DO UPDATE SET update_values.
    The unique constraint on `keys` does the deduplication, so concurrent
    writers for the same key converge on one row. Returns the stored row.
    """
    dialect = db.get_bind().dialect.name
    insert_fn = _DIALECT_INSERTS.get(dialect)
    if insert_fn is None:
        raise RuntimeError(f"Upsert is not supported on the '{dialect}' dialect")

    stmt = insert_fn(model).values(**keys, **insert_values)
    stmt = stmt.on_conflict_do_update(index_elements=list(keys), set_=update_values)
    db.execute(stmt)
    db.commit()

    return db.query(model).filter_by(**keys).one()

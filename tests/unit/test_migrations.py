import importlib.util
from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

import forumserver.models  # noqa: F401 ensure model metadata is loaded
from forumserver.db.session import Base

VERSIONS = Path(forumserver.models.__file__).resolve().parent.parent / "alembic" / "versions"


def _load_revision(name: str):
    spec = importlib.util.spec_from_file_location(name, VERSIONS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore[union-attr]
    return module


@pytest.mark.unit
@pytest.mark.parametrize("table", ["thread", "message"])
def test_initial_migration_matches_models(table):
    revision = _load_revision("0001_initial")
    engine = sa.create_engine("sqlite://")
    with engine.begin() as conn:
        ctx = MigrationContext.configure(conn)
        with Operations.context(ctx):
            revision.upgrade()
        columns = {c["name"]: c for c in sa.inspect(conn).get_columns(table)}
    engine.dispose()

    model = Base.metadata.tables[table]
    assert set(columns) == {c.name for c in model.columns}
    for column in model.columns:
        if column.primary_key:
            # SQLite reports INTEGER PRIMARY KEY as nullable
            continue
        assert columns[column.name]["nullable"] == column.nullable, column.name

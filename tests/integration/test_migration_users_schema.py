from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config

from alembic import command


def _alembic_config(sync_url: str) -> Config:
    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", sync_url)
    return alembic_config


def test_upgrade_creates_users_table_with_unique_email(tmp_path: Path) -> None:
    sync_url = f"sqlite+pysqlite:///{tmp_path / 'migration_users.db'}"
    command.upgrade(_alembic_config(sync_url), "head")

    engine = sa.create_engine(sync_url)
    inspector = sa.inspect(engine)

    assert "users" in inspector.get_table_names()
    columns = {column["name"]: column for column in inspector.get_columns("users")}
    assert set(columns) == {"id", "name", "email", "password_hash", "phone", "created_at"}
    assert columns["name"]["nullable"] is False
    assert columns["email"]["nullable"] is False
    assert columns["password_hash"]["nullable"] is False
    assert columns["phone"]["nullable"] is True
    unique_constraints = inspector.get_unique_constraints("users")
    assert any(constraint["column_names"] == ["email"] for constraint in unique_constraints)
    index_names = {index["name"] for index in inspector.get_indexes("users")}
    assert "ix_users_created_at" in index_names


def test_duplicate_email_rows_are_rejected_by_the_store(tmp_path: Path) -> None:
    sync_url = f"sqlite+pysqlite:///{tmp_path / 'migration_unique.db'}"
    command.upgrade(_alembic_config(sync_url), "head")
    engine = sa.create_engine(sync_url)
    insert = sa.text(
        "INSERT INTO users (name, email, password_hash) VALUES (:name, :email, :password_hash)"
    )

    with engine.begin() as connection:
        connection.execute(insert, {"name": "Kim", "email": "kim@x.com", "password_hash": "h"})

    with pytest.raises(sa.exc.IntegrityError), engine.begin() as connection:
        connection.execute(insert, {"name": "Kim", "email": "kim@x.com", "password_hash": "h"})


def test_downgrade_drops_users_table(tmp_path: Path) -> None:
    sync_url = f"sqlite+pysqlite:///{tmp_path / 'migration_downgrade.db'}"
    alembic_config = _alembic_config(sync_url)
    command.upgrade(alembic_config, "head")

    command.downgrade(alembic_config, "base")

    assert "users" not in sa.inspect(sa.create_engine(sync_url)).get_table_names()

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config

from alembic import command
from print_storefront.application.ports.user_repository_port import (
    DuplicateUserEmailError,
    UserCreateInput,
)
from print_storefront.infrastructure.db.database_probe import SqlAlchemyDatabaseProbe
from print_storefront.infrastructure.db.session import create_session_factory
from print_storefront.infrastructure.db.user_repository import SqlAlchemyUserRepository


def _upgrade_head(tmp_path: Path, filename: str) -> tuple[str, str]:
    db_path = tmp_path / filename
    sync_url = f"sqlite+pysqlite:///{db_path}"
    async_url = f"sqlite+aiosqlite:///{db_path}"

    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", sync_url)
    command.upgrade(alembic_config, "head")

    return sync_url, async_url


@pytest.mark.asyncio
async def test_create_user_assigns_id_and_created_at(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "user_repo_create.db")
    repo = SqlAlchemyUserRepository(create_session_factory(async_url))

    record = await repo.create_user(
        UserCreateInput(
            name="Kim",
            email="kim@x.com",
            password_hash="$2b$04$hash",
            phone="010-1234-5678",
        )
    )

    assert record.user_id > 0
    assert record.name == "Kim"
    assert record.email == "kim@x.com"
    assert record.password_hash == "$2b$04$hash"
    assert record.phone == "010-1234-5678"
    assert isinstance(record.created_at, datetime)
    assert record.created_at.utcoffset() == timedelta(0)


@pytest.mark.asyncio
async def test_get_by_email_and_email_exists(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "user_repo_lookup.db")
    repo = SqlAlchemyUserRepository(create_session_factory(async_url))
    created = await repo.create_user(
        UserCreateInput(name="Kim", email="kim@x.com", password_hash="hash")
    )

    found = await repo.get_by_email(email="kim@x.com")
    missing = await repo.get_by_email(email="lee@x.com")

    assert found == created
    assert found is not None
    assert found.phone is None
    assert missing is None
    assert await repo.email_exists(email="kim@x.com") is True
    assert await repo.email_exists(email="lee@x.com") is False


@pytest.mark.asyncio
async def test_duplicate_email_insert_raises_and_keeps_single_row(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "user_repo_duplicate.db")
    repo = SqlAlchemyUserRepository(create_session_factory(async_url))
    await repo.create_user(UserCreateInput(name="Kim", email="kim@x.com", password_hash="h1"))

    with pytest.raises(DuplicateUserEmailError):
        await repo.create_user(
            UserCreateInput(name="Other", email="kim@x.com", password_hash="h2")
        )

    engine = sa.create_engine(sync_url)
    with engine.begin() as connection:
        count = connection.execute(
            sa.text("SELECT COUNT(*) FROM users WHERE email = 'kim@x.com'")
        ).scalar_one()
    assert count == 1


@pytest.mark.asyncio
async def test_concurrent_duplicate_inserts_allow_exactly_one(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "user_repo_concurrent.db")
    repo = SqlAlchemyUserRepository(create_session_factory(async_url))

    results = await asyncio.gather(
        *(
            repo.create_user(
                UserCreateInput(name=f"Kim {index}", email="kim@x.com", password_hash="h")
            )
            for index in range(4)
        ),
        return_exceptions=True,
    )

    errors = [result for result in results if isinstance(result, BaseException)]
    assert len(results) - len(errors) == 1
    assert all(isinstance(error, DuplicateUserEmailError) for error in errors)


@pytest.mark.asyncio
async def test_database_probe_pings_reachable_database(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "probe.db")
    probe = SqlAlchemyDatabaseProbe(create_session_factory(async_url))

    await probe.ping()

"""Alembic environment for the Events API schema.

The target URL resolves in this order: `alembic -x url=...`, then the
application's Settings (DATABASE_URL, postgresql:// upgraded to asyncpg),
then `sqlalchemy.url` in alembic.ini.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

import events_api.models  # noqa: F401  registers every table on Base.metadata
from events_api.config import get_settings
from events_api.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def migration_url() -> str:
    override = context.get_x_argument(as_dictionary=True).get("url")
    if override:
        return override
    if os.environ.get("DATABASE_URL"):
        return get_settings().database_url
    return config.get_main_option("sqlalchemy.url")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata, compare_type=True, **kwargs,
    )


def _apply(connection=None) -> None:
    if connection is not None:
        _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _apply_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    # Emit SQL to stdout instead of connecting
    _configure(
        url=migration_url(), literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    _apply()
else:
    asyncio.run(_apply_online(migration_url()))

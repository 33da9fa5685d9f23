"""Reusable migration runner for both production and tests."""

import asyncio

from alembic.config import Config

from alembic import command


def run_migrations_sync(config_path: str = "alembic.ini") -> None:
    """Run Alembic migrations synchronously up to head."""
    alembic_cfg = Config(config_path)
    command.upgrade(alembic_cfg, "head")


async def run_migrations_async(config_path: str = "alembic.ini") -> None:
    """Run Alembic migrations from async context.

    Runs in a worker thread so Alembic's sync engine does not block the loop.
    """
    await asyncio.to_thread(run_migrations_sync, config_path)

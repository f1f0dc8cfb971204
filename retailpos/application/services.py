"""
Factory functions for dependency injection.

Wires the SQLite infrastructure to the application state. Consumers get an
explicit ``AppState`` object; nothing here is a module-level singleton.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from retailpos.application.state import AppState
from retailpos.config import get_logger, get_settings

logger = get_logger(__name__)


def build_app_state() -> AppState:
    """Create an AppState backed by the configured SQLite database."""
    # Lazy import infrastructure to keep the application layer importable alone
    from retailpos.infrastructure.storage.sqlite import get_entity_store, get_unit_of_work

    return AppState(uow_factory=get_unit_of_work, store_factory=get_entity_store)


async def prepare_database(seed: bool | None = None) -> bool:
    """
    Create the schema and optionally seed demo data.

    Returns True when seed data was written.
    """
    from retailpos.infrastructure.storage.sqlite import initialize_database, seed_database

    await initialize_database()
    if seed is None:
        seed = get_settings().pos.seed_on_init
    return await seed_database() if seed else False


@asynccontextmanager
async def open_app_state(seed: bool | None = None) -> AsyncIterator[AppState]:
    """
    Prepare the database, load a first snapshot and close the pool on exit.

    Usage:
        async with open_app_state() as state:
            await state.add_sale(...)
    """
    from retailpos.infrastructure.storage.sqlite import close_pool

    try:
        await prepare_database(seed)
        state = build_app_state()
        await state.fetch_data()
        yield state
    finally:
        await close_pool()

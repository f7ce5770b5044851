"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.

DB opens a session per request. WriteDB does the same while holding the
store's write lock until the commit finishes; every mutating endpoint uses it.

Both are function-scoped: the commit runs as soon as the endpoint returns and
before the response is built, so a failed commit still reaches the
SQLAlchemyError handler and the client gets a 500 instead of a 200.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.db.session import Store


def get_store(request: Request) -> Store:
    """Return the store created by the application lifespan."""
    return request.app.state.store  # type: ignore[no-any-return]


async def get_db(store: Annotated[Store, Depends(get_store)]) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session that commits on success and rolls back on exception."""
    async with store.session() as session:
        yield session


async def get_write_db(
    store: Annotated[Store, Depends(get_store)],
) -> AsyncGenerator[AsyncSession, None]:
    """Like get_db, but serialized with every other write in the process."""
    async with store.write_lock, store.session() as session:
        yield session


DB = Annotated[AsyncSession, Depends(get_db, scope="function")]
WriteDB = Annotated[AsyncSession, Depends(get_write_db, scope="function")]

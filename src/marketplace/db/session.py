import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config
from sqlalchemy import MetaData, event, func, select
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from marketplace.config import Settings
from marketplace.logging import get_logger

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"

# Naming conventions for database constraints.
# Without these, Alembic can't generate consistent constraint names across migrations.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",  # Index
    "uq": "uq_%(table_name)s_%(column_0_name)s",  # Unique constraint
    "ck": "ck_%(table_name)s_%(constraint_name)s",  # Check constraint
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # Foreign key
    "pk": "pk_%(table_name)s",  # Primary key
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    All models inherit from this class. SQLAlchemy uses Base.metadata to track
    all registered models and their table schemas.

    The naming_convention ensures all constraints have predictable names,
    which is critical for Alembic migrations to work correctly.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """SQLite ignores REFERENCES clauses unless this pragma is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def migration_config(connection: Connection | None = None) -> Config:
    """Build an Alembic config pointing at the packaged migration scripts.

    When a connection is given, env.py runs the migrations on it instead of
    opening its own engine.
    """
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    if connection is not None:
        config.attributes["connection"] = connection
    return config


def _upgrade_to_head(connection: Connection) -> None:
    command.upgrade(migration_config(connection), "head")


class Store:
    """The marketplace's single embedded relational store.

    Owns the async engine, the session factory and the process-wide write lock.
    Create one per process, call init() on startup and dispose() on shutdown.

    Usage:
        store = Store.from_settings(settings)
        await store.init()
        async with store.session() as session:
            ...
        await store.dispose()
    """

    def __init__(
        self,
        database_url: str,
        *,
        echo: bool = False,
        busy_timeout: float = 30.0,
        seed_demo_data: bool = False,
    ) -> None:
        self.database_url = database_url
        self.seed_demo_data = seed_demo_data
        self.engine = create_async_engine(
            database_url,
            echo=echo,
            # aiosqlite forwards these to sqlite3.connect()
            connect_args={"timeout": busy_timeout},
        )
        event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)

        # expire_on_commit=False keeps objects usable after commit without re-querying.
        # This is important for async because accessing expired attributes would trigger sync I/O.
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)

        # Held around validate + write + commit so two mutating requests never
        # interleave between a rule check and the write it guards.
        self.write_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        return cls(
            settings.database_url,
            echo=settings.db_echo,
            busy_timeout=settings.db_busy_timeout,
            seed_demo_data=settings.seed_demo_data,
        )

    async def init(self) -> None:
        """Prepare the database file, apply pending migrations and seed demo data."""
        database = make_url(self.database_url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)

        async with self.engine.begin() as conn:
            await conn.run_sync(_upgrade_to_head)
        logger.info("database_migrated", database=database)

        if self.seed_demo_data:
            await self._seed_if_empty()

    async def _seed_if_empty(self) -> None:
        # Imported here: seed pulls in the models, which import Base from this module.
        from marketplace.db.seed import seed_demo_data
        from marketplace.models import User

        async with self.session() as session:
            user_count = (await session.execute(select(func.count(User.id)))).scalar_one()
            if user_count:
                return
            await seed_demo_data(session)
        logger.info("demo_data_seeded")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that commits on success and rolls back on exception.

        This is the single place where transaction boundaries are managed;
        services and repositories never call commit() or rollback() directly.
        """
        async with self.sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Close all pooled database connections."""
        await self.engine.dispose()

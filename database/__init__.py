"""Database session/engine bootstrap for RPMScope."""

import os

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from database.models import Base, NicheRpmRate, UnknownNiche  # noqa: F401

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite+aiosqlite:///rpmscope.db",
)

engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    connect_args={"timeout": 30} if DATABASE_URL.startswith("sqlite") else {},
)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(bind=None):
    """Create tables. Schema migration is out of scope; create_all only."""
    target = bind if bind is not None else engine
    async with target.begin() as conn:
        if conn.dialect.name == "sqlite":
            await conn.exec_driver_sql("PRAGMA journal_mode=WAL")
            await conn.exec_driver_sql("PRAGMA synchronous=NORMAL")
        await conn.run_sync(Base.metadata.create_all)

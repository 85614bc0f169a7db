"""
Async SQLAlchemy session factory (SQLite via aiosqlite).
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forms_api.core.config import settings
from forms_api.db.models import Base

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """Dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create every table registered on `Base.metadata` if missing."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

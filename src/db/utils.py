from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from src.db.models.base import Base


async def create_db_tables(engine: AsyncEngine):
    """Создает таблицы в БД на основе моделей SQLAlchemy."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def create_session_pool(database_url: str, echo: bool = False) -> tuple[AsyncEngine, async_sessionmaker]:
    """Создает движок и фабрику сессий."""
    engine = create_async_engine(database_url, echo=echo)
    session_pool = async_sessionmaker(engine, expire_on_commit=False)

    return engine, session_pool

"""Configuração do banco de dados async"""
from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)

# Base para modelos SQLAlchemy
Base = declarative_base()


def get_async_database_url() -> str:
    """Garante URL async (asyncpg para PostgreSQL, aiosqlite para SQLite)"""
    url = settings.database_url
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://")
    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://")
    return url


def create_engine_for(url: str, **overrides) -> AsyncEngine:
    """Cria engine async com pool adequado ao dialeto"""
    if url.startswith("sqlite"):
        # SQLite não aceita pool_size/max_overflow
        return create_async_engine(url, echo=settings.DEBUG, **overrides)

    options = dict(
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=settings.DEBUG,
    )
    if overrides.get("poolclass") is NullPool:
        for key in ("pool_size", "max_overflow", "pool_recycle", "pool_pre_ping"):
            options.pop(key)
    options.update(overrides)
    return create_async_engine(url, **options)


engine = create_engine_for(get_async_database_url())

# Session factory async
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency async para obter sessão do banco de dados.
    Uso: db: AsyncSession = Depends(get_db)
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def task_session() -> AsyncIterator[AsyncSession]:
    """
    Sessão isolada para tasks Celery.
    Cada task roda em seu próprio event loop, então usa engine sem pool.
    """
    task_engine = create_engine_for(get_async_database_url(), poolclass=NullPool)
    factory = async_sessionmaker(task_engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        await task_engine.dispose()


async def init_db():
    """Inicializa o banco de dados criando todas as tabelas"""
    import app.models  # noqa: F401 - registra tabelas no metadata
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Banco de dados inicializado")


async def close_db():
    """Fecha todas as conexões do banco"""
    await engine.dispose()
    logger.info("Conexões do banco de dados fechadas")

"""Fixtures compartilhadas: banco SQLite em memória por teste e cliente HTTP"""
import os

# Precisa vir antes de qualquer import de `app` (settings é lido no import)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_API_KEY", "test-admin-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FILE", "")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401 - registra tabelas no metadata
from app.core.database import Base, get_db
from app.main import app as fastapi_app
from app.models import (
    Discipline,
    Edition,
    Game,
    GameEvent,
    GameKind,
    GameStatus,
    Player,
    PlayerStatistics,
    Team,
    TeamStatistics,
)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as client:
        yield client
    fastapi_app.dependency_overrides.pop(get_db, None)


class Seeder:
    """Atalhos para popular o banco nos testes"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, obj):
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def discipline(self, name="Futsal"):
        return await self.add(Discipline(name=name))

    async def edition(self, name="Interclasse", year=2024):
        return await self.add(Edition(name=name, year=year))

    async def team(self, name, edition=None):
        return await self.add(Team(name=name, edition_id=edition.id if edition else None))

    async def player(self, name, team=None, edition=None):
        return await self.add(Player(
            name=name,
            team_id=team.id if team else None,
            edition_id=edition.id if edition else None,
        ))

    async def team_stats(self, team, discipline, **counters):
        return await self.add(TeamStatistics(team_id=team.id, discipline_id=discipline.id, **counters))

    async def player_stats(self, player, discipline, **counters):
        return await self.add(PlayerStatistics(player_id=player.id, discipline_id=discipline.id, **counters))

    async def game(self, discipline, team1, team2, goals1, goals2,
                   status=GameStatus.FINISHED, kind=GameKind.GROUP_STAGE, scheduled_at=None):
        return await self.add(Game(
            discipline_id=discipline.id,
            team1_id=team1.id,
            team2_id=team2.id,
            team1_goals=goals1,
            team2_goals=goals2,
            status=status,
            kind=kind,
            scheduled_at=scheduled_at,
        ))

    async def event(self, game, player, kind):
        return await self.add(GameEvent(game_id=game.id, player_id=player.id if player else None, kind=kind))


@pytest.fixture
def seeder_cls():
    return Seeder


@pytest.fixture
def seed(db):
    return Seeder(db)

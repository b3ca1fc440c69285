import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from agenda.common.database import get_db, init_db
from agenda.common.result import get_or_raise
from agenda.contacts.repository import ContactRepository
from agenda.main import app


@pytest.fixture
async def engine():
    """Motor SQLite en memoria compartido por todas las sesiones de una prueba."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db(session_factory):
    """Fixture que proporciona una AsyncSession real para las pruebas."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_contact(session_factory):
    """Fixture que crea contactos en la base de datos de la prueba."""

    async def _make(**fields):
        async with session_factory() as session:
            return get_or_raise(await ContactRepository.create(session, **fields))

    return _make


@pytest.fixture
def count_contacts(session_factory):
    async def _count():
        async with session_factory() as session:
            return get_or_raise(await ContactRepository.count(session))

    return _count


@pytest.fixture
async def client(session_factory):
    """Cliente HTTP contra la aplicación con la base de datos de la prueba."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
    app.dependency_overrides.clear()

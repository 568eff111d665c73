import os

os.environ.setdefault("APP_ENV", "development")
os.environ["DB_TYPE"] = "sqlite"
os.environ["SQLITE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.db import Base, enable_sqlite_foreign_keys, get_db
from app.models.inventory.branch_models import Branch
from app.models.inventory.product_models import Product
from main import app as fastapi_app

OWNER = "owner-1"
OTHER_OWNER = "owner-2"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def add_branch(db):
    async def _add(name, code, owner=OWNER, is_active=True, **extra):
        branch = Branch(user_id=owner, name=name, code=code, is_active=is_active, **extra)
        db.add(branch)
        await db.commit()
        return branch

    return _add


@pytest.fixture
def add_product(db):
    async def _add(sku, stock, branch_id=None, owner=OWNER, **extra):
        extra.setdefault("name", f"Product {sku}")
        extra.setdefault("category", "Medicines")
        product = Product(user_id=owner, sku=sku, stock=stock, branch_id=branch_id, **extra)
        db.add(product)
        await db.commit()
        return product

    return _add

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database.connection import Base, get_db
from app.main import app as fastapi_app
from app.models.category import Category
from app.models.platform import Platform
from app.models.product import Product
from app.models.ranking import Ranking

TEST_DB_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def create_test_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    connection = engine.connect()
    trans = connection.begin()
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    fastapi_app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()


class Factory:
    """Creates rows inside the test transaction."""

    def __init__(self, db):
        self.db = db
        self._seq = 0

    def _next(self) -> int:
        self._seq += 1
        return self._seq

    def _save(self, obj):
        self.db.add(obj)
        self.db.flush()
        return obj

    def platform(self, name=None, display_name=None, is_active=True):
        n = self._next()
        return self._save(Platform(
            name=name or f"platform_{n}",
            display_name=display_name or f"Platform {n}",
            base_url=f"https://platform{n}.example.com",
            is_active=is_active,
        ))

    def category(self, name=None, display_name=None, parent=None, is_active=True):
        n = self._next()
        return self._save(Category(
            name=name or f"category_{n}",
            display_name=display_name or f"Category {n}",
            parent_id=parent.id if parent is not None else None,
            is_active=is_active,
        ))

    def product(self, platform, name=None, price="1000", category=None,
                is_available=True, last_updated=None, **fields):
        n = self._next()
        return self._save(Product(
            platform_id=platform.id,
            platform_product_id=f"{platform.name}_{n}",
            name=name or f"Product {n}",
            price=Decimal(price),
            category_id=category.id if category is not None else None,
            product_url=f"{platform.base_url}/products/{n}",
            is_available=is_available,
            last_updated=last_updated or datetime.utcnow(),
            **fields,
        ))

    def ranking(self, product, rank, rank_change=None, rank_date=None, sales_volume=None):
        return self._save(Ranking(
            product_id=product.id,
            platform_id=product.platform_id,
            category_id=product.category_id,
            rank=rank,
            rank_date=rank_date or datetime.utcnow(),
            rank_change=rank_change,
            sales_volume=sales_volume,
        ))


@pytest.fixture()
def factory(db):
    return Factory(db)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from catalog.database import Base, create_catalog_engine, get_db
from catalog.main import app
from catalog.models import *
from catalog.schemas.product import ProductEntityCreate
from catalog.services.product_service import create_product_entity


@pytest.fixture
def engine():
    # One shared in-memory connection; built by the same factory as production
    engine = create_catalog_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(db):
    def _make_product(name="Shirt", description="d", cover_url=None):
        return create_product_entity(
            db,
            ProductEntityCreate(name=name, description=description, cover_url=cover_url)
        )
    return _make_product

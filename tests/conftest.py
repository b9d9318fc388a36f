import pytest
from fastapi.testclient import TestClient

from app.database import Database
from app.main import create_app

# In-memory SQLite, one shared connection per Database
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def database():
    database = Database(TEST_DATABASE_URL)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app = create_app(TEST_DATABASE_URL)
    # Entering the context runs the lifespan, which builds app.state.db
    with TestClient(app) as client:
        yield client

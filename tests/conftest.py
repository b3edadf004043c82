"""Pytest configuration and fixtures for testing."""
import os
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app modules
TEST_DATABASE_URL = "sqlite:///./test.db"  # File-based DB for inspection
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ['REDIS_HOST'] = 'localhost'
os.environ['REDIS_PORT'] = '6379'

# This import is crucial for populating Base.metadata before anything else.
from config import database  # noqa: E402
from config.database import get_db  # noqa: E402
from models.base_model import base as Base  # noqa: E402
from main import create_fastapi_app  # noqa: E402


@pytest.fixture(scope="session")
def engine():
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},  # SQLite specific
        echo=False
    )
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine) -> Generator[sessionmaker, None, None]:
    """Sessions bound to one connection whose outer transaction is rolled back after the test."""
    Base.metadata.create_all(bind=engine)
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=connection)
    try:
        yield SessionLocal
    finally:
        transaction.rollback()
        connection.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def mock_redis():
    """Configures a MagicMock for the Redis client to simulate its behavior."""
    _redis_store = {}
    _ttls = {}
    _pipeline_commands = []

    def mock_incr(key):
        _redis_store[key] = int(_redis_store.get(key) or 0) + 1
        return _redis_store[key]

    def mock_expire(key, time, nx=False):
        if nx and key in _ttls:
            return False
        _ttls[key] = time
        return True

    def mock_ttl(key):
        if key not in _redis_store:
            return -2
        return _ttls.get(key, -1)

    m = MagicMock()
    m.get.side_effect = _redis_store.get
    m.incr.side_effect = mock_incr
    m.expire.side_effect = mock_expire
    m.ttl.side_effect = mock_ttl
    m.ping.return_value = True

    pipeline_mock = MagicMock()

    def _pipeline_incr(key):
        _pipeline_commands.append(("incr", key))

    def _pipeline_expire(key, time, nx=False):
        _pipeline_commands.append(("expire", key, time, nx))

    def _pipeline_ttl(key):
        _pipeline_commands.append(("ttl", key))

    def _pipeline_execute():
        results = []
        for cmd in _pipeline_commands:
            if cmd[0] == "incr":
                results.append(mock_incr(cmd[1]))
            elif cmd[0] == "expire":
                results.append(mock_expire(cmd[1], cmd[2], cmd[3]))
            elif cmd[0] == "ttl":
                results.append(mock_ttl(cmd[1]))
        _pipeline_commands.clear()
        return results

    pipeline_mock.incr.side_effect = _pipeline_incr
    pipeline_mock.expire.side_effect = _pipeline_expire
    pipeline_mock.ttl.side_effect = _pipeline_ttl
    pipeline_mock.execute.side_effect = _pipeline_execute
    m.pipeline.return_value = pipeline_mock

    def reset_store():
        _redis_store.clear()
        _ttls.clear()
        _pipeline_commands.clear()
    m.reset_store = reset_store

    return m


@pytest.fixture(scope="function")
def app_factory(mock_redis: MagicMock):
    """Build a test client around a given get_db override, with Redis mocked."""
    clients = []

    def _create_client(override_get_db) -> TestClient:
        app = create_fastapi_app()
        app.dependency_overrides[get_db] = override_get_db
        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    from config import redis_config
    with patch.object(redis_config.redis_config, 'get_client', return_value=mock_redis):
        yield _create_client
        for client in clients:
            client.__exit__(None, None, None)


@pytest.fixture(scope="function")
def api_client(db_session_factory: sessionmaker, app_factory) -> TestClient:
    """Test client whose requests run against the per-test SQLite transaction."""

    def override_get_db():
        session = db_session_factory()
        try:
            yield session
            session.commit()  # Commit changes made by the request
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return app_factory(override_get_db)


@pytest.fixture
def seeded_db(db_session_factory: sessionmaker) -> dict:
    """Two committed categories, Electronics and Books."""
    from models.product_category import ProductCategoryModel

    session = db_session_factory()
    try:
        electronics = ProductCategoryModel(product_category_name="Electronics")
        books = ProductCategoryModel(product_category_name="Books")
        session.add_all([electronics, books])
        session.commit()
        return {"electronics_id": electronics.idproduct_category, "books_id": books.idproduct_category}
    finally:
        session.close()

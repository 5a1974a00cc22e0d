"""
Test fixtures for the student records manager.

Every test gets its own file-backed SQLite database under tmp_path, so the
foreign key cascades behave exactly as in the real app.
"""

import io

import pytest

from studentms.cli.prompts import Prompter
from studentms.core.database import build_engine, drop_database_tables, init_db
from studentms.seed import seed_data
from studentms.services.cache import DataStore
from studentms.services.sync import RecordService

VALID_PHONE = "021 123 4567"


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def engine(db_url):
    engine = build_engine(db_url)
    yield engine
    drop_database_tables(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Empty store with the schema in place."""
    session = init_db(engine)
    yield session
    session.close()


@pytest.fixture
def seeded_db(db):
    seed_data(db)
    return db


@pytest.fixture
def service(db):
    """Service over an empty store and an empty cache."""
    svc = RecordService(db, DataStore())
    assert svc.reload()
    return svc


@pytest.fixture
def seeded_service(seeded_db):
    """Service over the sample data, cache loaded from the store."""
    svc = RecordService(seeded_db, DataStore())
    assert svc.reload()
    return svc


@pytest.fixture
def scripted():
    """Build a Prompter that reads the given lines and records its output."""
    def _make(*lines):
        text = "".join(f"{line}\n" for line in lines)
        return Prompter(io.StringIO(text), io.StringIO())
    return _make

from pathlib import Path
import os
import tempfile
import pytest

# Must be set before `company_api` is imported anywhere.
TEST_DB = Path(tempfile.gettempdir()) / f"company_api_test_{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"


@pytest.fixture(scope="session", autouse=True)
def reset_db():
    """Ensure a fresh SQLite database for tests."""
    from sqlmodel import SQLModel
    from company_api.database import engine, create_db_and_tables
    SQLModel.metadata.drop_all(engine)
    create_db_and_tables()
    yield
    engine.dispose()
    if TEST_DB.exists():
        TEST_DB.unlink()


@pytest.fixture
def session():
    """A standalone `Session` on the test database."""
    from sqlmodel import Session
    from company_api.database import engine
    with Session(engine) as s:
        yield s

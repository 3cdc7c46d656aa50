"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with sensible
test fallbacks (SQLite in-memory) and exposes FastAPI dependencies.
"""
import logging
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_TEST_SQLITE_URL = "sqlite+pysqlite:///:memory:"


# Database connection URL
# Generate dynamically from individual components if DATABASE_URL is not provided
def _get_database_url() -> str:
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    if not all([db_user, db_password, db_host, db_port, db_name]):
        missing = []
        if not db_user: missing.append("POSTGRES_USER")
        if not db_password: missing.append("POSTGRES_PASSWORD")
        if not db_host: missing.append("POSTGRES_HOST")
        if not db_port: missing.append("POSTGRES_PORT")
        if not db_name: missing.append("POSTGRES_DB")
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while an individual test is running,
    so module import time during collection is covered by checking whether
    pytest is already in ``sys.modules``. ``PYTEST_RUNNING=1`` forces it.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if "pytest" in sys.modules:
        return True
    return False


def _sqlite_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # StaticPool keeps one connection so the schema survives across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


# Test override strategy:
# 1. If CUSTOMER_SERVICE_TEST_DB is set, use it.
# 2. Else under pytest, force in-memory sqlite.
# 3. Else DATABASE_URL / POSTGRES_* components.
explicit_test_db = os.getenv("CUSTOMER_SERVICE_TEST_DB")

if explicit_test_db:
    DATABASE_URL = explicit_test_db
elif _is_pytest_runtime():
    DATABASE_URL = _TEST_SQLITE_URL
else:
    DATABASE_URL = _get_database_url()

engine = create_engine(DATABASE_URL, **_sqlite_kwargs(DATABASE_URL))

# An in-memory database starts empty on every process, so create the schema
# eagerly; real deployments rely on Alembic migrations instead.
if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    from customer_service.db import models  # local import to avoid circular import at module load
    models.Base.metadata.create_all(bind=engine)
    logger.debug("Created in-memory schema for %s", DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

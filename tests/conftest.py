import pytest
from sqlalchemy.orm import Session

from customer_service.db.database import SessionLocal, engine
from customer_service.db import models


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory resets per process)."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Truncate all tables between tests without dropping metadata (faster)."""
    connection = engine.connect()
    trans = connection.begin()
    for table in reversed(models.Base.metadata.sorted_tables):
        connection.execute(table.delete())
    trans.commit()
    connection.close()
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def customer_factory(db_session: Session):
    def _create(first_name: str, last_name: str = "Doe", email: str = None, phone_number: str = "555-0100"):
        customer = models.Customer(
            first_name=first_name,
            last_name=last_name,
            email=email or f"{first_name.lower()}@example.com",
            phone_number=phone_number,
        )
        db_session.add(customer)
        db_session.commit()
        db_session.refresh(customer)
        return customer
    return _create

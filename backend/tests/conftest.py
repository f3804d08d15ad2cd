import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.core.database import Base, get_db
from app.db.models import Property, Space
from app.main import app

# Use in-memory SQLite for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

# (address, type, price, [(space type, size), ...]); ids follow list order
SAMPLE_PROPERTIES = [
    ("123 Main St, Springfield", "house", 350000, [("bedroom", 200.0), ("kitchen", 100.0)]),
    ("45 Oak Ave, Metropolis", "apartment", 220000, [("bedroom", 150.0), ("bathroom", 60.0)]),
    ("789 Pine Rd, Smallville", "condo", 275000, [("living room", 300.0)]),
    ("12 River Ln, Riverton", "house", 495000, []),
    ("9 Sunset Blvd, Coast City", "apartment", 310000,
     [("kitchen", 120.0), ("bedroom", 180.0), ("bathroom", 50.0)]),
]


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine"""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return engine


@pytest.fixture(scope="function")
def test_db_session(test_engine):
    """Create a test database session"""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def seeded_session(test_db_session):
    """Session with the five sample properties and their spaces stored"""
    for address, property_type, price, spaces in SAMPLE_PROPERTIES:
        db_property = Property(
            address=address,
            type=property_type,
            price=price,
            description=f"Sample {property_type}"
        )
        for space_type, size in spaces:
            db_property.spaces.append(Space(type=space_type, size=size))
        test_db_session.add(db_property)
        test_db_session.commit()

    return test_db_session


@pytest.fixture(scope="function")
def override_get_db(test_db_session):
    """Override the get_db dependency for testing"""
    def _override_get_db():
        try:
            yield test_db_session
        finally:
            pass
    return _override_get_db


@pytest.fixture(scope="function")
def client(override_get_db):
    """API client bound to the test session"""
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

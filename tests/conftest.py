import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("TESTING", "true")

import time
import pytest
from datetime import timedelta
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

import main
from app.core.config import settings
from app.core.database import Base, get_db
from app.utils import deps as deps_utils
from tests.helpers import factories

test_db_url = settings.TEST_DATABASE_URL or "sqlite:///./test.db"

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(test_db_url)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()
    if test_db_url == "sqlite:///./test.db" and os.path.exists("./test.db"):
        os.remove("./test.db")

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        # Services commit their own work, so wipe rows instead of relying on rollback
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_transactional_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def token_for_role():
    def _make(role: str = "student", user_id: int = 1, expires_in: timedelta = timedelta(hours=1)) -> str:
        payload = {
            "sub": f"user-{user_id}",
            "user_id": user_id,
            "username": f"{role}{user_id}",
            "role": role,
            "exp": int(time.time() + expires_in.total_seconds()),
        }
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return _make

@pytest.fixture
def auth_headers(token_for_role):
    def _make(role: str = "student", user_id: int = 1) -> dict:
        return {"Authorization": f"Bearer {token_for_role(role, user_id)}"}
    return _make

@pytest.fixture
def sample_exam(db_session):
    """Two questions worth 5 marks each: a multiple choice and a short answer ("42")."""
    return factories.create_sample_exam(db_session)

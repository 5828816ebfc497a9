"""
Shared fixtures: in-memory database, fake media uploader and a test client
wired to both through dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, get_password_hash
from app.db.base import Base
from app.db.session import create_session_factory, get_db
from app.main import app as application
from app.models import User
from app.models.user import default_profile
from app.services.media import get_media_uploader

PHOTO_URL = "https://res.cloudinary.com/demo/image/upload/v1/photo.png"


class FakeUploader:
    """Records uploads instead of calling the media host."""

    def __init__(self, url: str = PHOTO_URL):
        self.url = url
        self.calls = []
        self.error = None

    @property
    def is_configured(self) -> bool:
        return True

    def upload(self, content: bytes, mimetype: str) -> str:
        self.calls.append((content, mimetype))
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def client(session_factory, uploader):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_media_uploader] = lambda: uploader

    yield TestClient(application)

    application.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Insert a user directly and return it."""

    def _make_user(
        email: str = "x@y.com",
        password: str = "secret123",
        role: str = "applicant",
        **profile,
    ) -> User:
        user_profile = default_profile()
        user_profile.update(profile)
        user = User(
            fullname="Test User",
            email=email,
            phone_number="5551234",
            hashed_password=get_password_hash(password),
            role=role,
            profile=user_profile,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def current_user(make_user):
    return make_user()


@pytest.fixture
def auth_client(client, current_user):
    """Client carrying a valid session cookie for ``current_user``."""
    client.cookies.set("token", create_access_token(current_user.id))
    return client

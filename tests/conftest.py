from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import database
import messaging
from auth import create_access_token
from database import Base, Transaction, User, get_db
from main import app


@pytest.fixture
def session_factory(monkeypatch):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(database, "SessionLocal", factory)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def pushes(monkeypatch):
    """Record every push instead of reaching Firebase."""
    sent = []

    def fake_send_push(token, *, title, body, data=None):
        if not token:
            return None
        sent.append({"token": token, "title": title, "body": body, "data": data})
        return f"projects/test/messages/{len(sent)}"

    monkeypatch.setattr(messaging, "send_push", fake_send_push)
    return sent


@pytest.fixture
def client(session_factory, pushes):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(user_id="awa", monthly_budget=0.0, fcm_token="device-token"):
        user = User(
            id=user_id,
            password="x",
            monthly_budget=monthly_budget,
            fcm_token=fcm_token,
        )
        db.add(user)
        db.commit()
        return user

    return _make_user


@pytest.fixture
def add_transaction(db):
    def _add(user_id, type, amount, date, category=None):
        tx = Transaction(
            user_id=user_id, type=type, amount=amount, date=date, category=category
        )
        db.add(tx)
        db.commit()
        return tx.id

    return _add


@pytest.fixture
def auth_headers():
    def _headers(user_id):
        token = create_access_token(data={"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return _headers

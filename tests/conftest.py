"""Shared fixtures: in-memory SQLite database and an API client."""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

import main
from database import Base, SessionLocal, engine


ACCOUNT = "0000000123"
COUNTERPARTY = "9999999999"


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    return TestClient(main.app)


def transaction_payload(amount, category: str = "product", account: str = ACCOUNT) -> dict:
    return {
        "account_from": account,
        "account_to": COUNTERPARTY,
        "currency_shortname": "usd",
        "sum": amount,
        "expense_category": category,
    }


def limit_payload(amount, category: str = "product", account: str = ACCOUNT) -> dict:
    return {
        "account": account,
        "expense_category": category,
        "limit_sum": amount,
    }

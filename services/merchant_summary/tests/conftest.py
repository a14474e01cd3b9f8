from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.routes.summary import get_current_datetime, get_document_store
from db.store import DocumentNotFound, DocumentStore, DocumentStoreError
from main import app


class FakeDocumentStore(DocumentStore):
    """In-memory store; keys listed in `failing` raise a backend error."""

    def __init__(self, documents=None, failing=()):
        self.documents = dict(documents or {})
        self.failing = set(failing)
        self.requested = []

    def get(self, key):
        self.requested.append(key)
        if key in self.failing:
            raise DocumentStoreError(f"connection reset while reading {key}")
        if key not in self.documents:
            raise DocumentNotFound(key)
        return self.documents[key]


@pytest.fixture
def wednesday():
    # 2024-05-15 is a Wednesday
    return datetime(2024, 5, 15, 10, 30)


@pytest.fixture
def summary_doc():
    def _make(merchant_id, amount, summary_date="2024-05-15"):
        return {
            "merchant_id": merchant_id,
            "summary_date": summary_date,
            "amount": amount,
            "count": 3,
            "last_trx_date": f"{summary_date}T09:12:00",
        }
    return _make


@pytest.fixture
def fake_store():
    return FakeDocumentStore()


@pytest.fixture
def client(fake_store, wednesday):
    app.dependency_overrides[get_document_store] = lambda: fake_store
    app.dependency_overrides[get_current_datetime] = lambda: wednesday
    yield TestClient(app)
    app.dependency_overrides.clear()

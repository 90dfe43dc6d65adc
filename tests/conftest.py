from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_document_service
from app.domains.documents.entities import Author, Document
from app.domains.documents.services import DocumentService
from app.main import app


@pytest.fixture()
def service() -> DocumentService:
    return DocumentService()


@pytest.fixture()
def client(service: DocumentService):
    app.dependency_overrides[get_document_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_document_service, None)


def make_document(
    id: str | None,
    title: str | None = None,
    content: str | None = None,
    author: Author | None = None,
    created: datetime | None = None,
) -> Document:
    return Document(
        id=id,
        title=title,
        content=content,
        author=author,
        created=created if created is not None else datetime.now(timezone.utc),
    )

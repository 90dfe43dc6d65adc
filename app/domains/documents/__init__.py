from app.domains.documents.entities import Document, Author
from app.domains.documents.schemas import (
    AuthorSchema, DocumentSave, DocumentResponse, SearchRequest,
    DocumentSearchResponse
)
from app.domains.documents.services import DocumentService

__all__ = [
    "Document", "Author",
    "AuthorSchema", "DocumentSave", "DocumentResponse", "SearchRequest",
    "DocumentSearchResponse",
    "DocumentService"
]

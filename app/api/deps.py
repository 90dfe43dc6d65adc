from app.domains.documents.services import DocumentService

# Единственный экземпляр на процесс: хранилище живет в памяти
_document_service = DocumentService()


def get_document_service() -> DocumentService:
    """Dependency для FastAPI"""
    return _document_service

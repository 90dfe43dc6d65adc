from typing import Optional, List
import logging
import uuid

from app.core.errors import InvalidDocumentError
from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.entities import Document
from app.domains.documents.filters import matches_request
from app.domains.documents.schemas import SearchRequest

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, repository: Optional[DocumentRepository] = None):
        self.document_repository = repository or DocumentRepository()

    def save(self, document: Document) -> Document:
        """Сохранение документа (upsert), при отсутствии id генерируется новый.

        Поле created не изменяется: его выставляет вызывающая сторона.
        Возвращается тот же объект, что был передан.
        """
        if document is None:
            raise InvalidDocumentError("Document must not be None")

        generated = not document.has_id()
        if generated:
            document.id = str(uuid.uuid4())

        self.document_repository.put(document)
        logger.debug(f"Saved document {document.id} (generated_id={generated})")
        return document

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по id, None если его нет"""
        return self.document_repository.get(document_id)

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Поиск документов по всем заданным критериям запроса"""
        documents = self.document_repository.list_all()
        if request is None:
            return documents

        found = [document for document in documents if matches_request(document, request)]
        logger.debug(f"Search matched {len(found)} of {len(documents)} documents")
        return found

    def count(self) -> int:
        """Количество документов в хранилище"""
        return self.document_repository.count()

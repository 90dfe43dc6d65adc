from typing import Optional, List, Dict
import logging
import threading

from app.domains.documents.entities import Document

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий документов в памяти процесса"""

    def __init__(self):
        self._documents: Dict[str, Document] = {}
        self._lock = threading.Lock()

    def get(self, document_id: str) -> Optional[Document]:
        """Получение документа по идентификатору"""
        with self._lock:
            return self._documents.get(document_id)

    def put(self, document: Document) -> Document:
        """Вставка или замена документа по его идентификатору"""
        with self._lock:
            replaced = document.id in self._documents
            self._documents[document.id] = document
        logger.debug(f"Stored document {document.id} (replaced={replaced})")
        return document

    def list_all(self) -> List[Document]:
        """Снимок всех сохраненных документов"""
        with self._lock:
            return list(self._documents.values())

    def count(self) -> int:
        """Количество сохраненных документов"""
        with self._lock:
            return len(self._documents)

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Author:
    """Автор документа"""
    id: str
    name: Optional[str] = None


@dataclass
class Document:
    """Сущность документа домена Documents"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    # выставляется вызывающей стороной, хранилище его не меняет
    created: Optional[datetime] = None

    def has_id(self) -> bool:
        """Проверка, что у документа есть непустой идентификатор"""
        return bool(self.id)

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, created={self.created})"

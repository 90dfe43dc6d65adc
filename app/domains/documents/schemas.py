from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime

from app.domains.documents.entities import Author, Document


class AuthorSchema(BaseModel):
    """Схема автора документа"""
    id: str
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentSave(BaseModel):
    """Схема для сохранения (upsert) документа"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    def to_entity(self) -> Document:
        """Преобразование схемы в доменную сущность"""
        return Document(
            id=self.id,
            title=self.title,
            content=self.content,
            author=Author(id=self.author.id, name=self.author.name) if self.author else None,
            created=self.created
        )


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SearchRequest(BaseModel):
    """Критерии поиска документов, каждый может отсутствовать"""
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None


class DocumentSearchResponse(BaseModel):
    """Схема для ответа с результатами поиска"""
    documents: List[DocumentResponse]
    total_found: int

"""Предикаты поиска документов.

Каждый фильтр независим: пустой или отсутствующий критерий пропускает
любой документ, а итоговый результат - конъюнкция всех фильтров.
"""
import re
from datetime import datetime, timezone
from typing import Optional, Sequence

from app.domains.documents.entities import Document
from app.domains.documents.schemas import SearchRequest


def _as_utc(value: datetime) -> datetime:
    # naive значения считаем UTC, иначе сравнение с aware падает
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def matches_title(document: Document, title_prefixes: Optional[Sequence[str]]) -> bool:
    """Заголовок начинается с любого из префиксов (без учета регистра)"""
    if not title_prefixes:
        return True
    if document.title is None:
        return False
    title = document.title.lower()
    return any(title.startswith(prefix.lower()) for prefix in title_prefixes)


def matches_content(document: Document, contains_contents: Optional[Sequence[str]]) -> bool:
    """Содержимое содержит любое из слов целиком (без учета регистра)"""
    if not contains_contents:
        return True
    if document.content is None:
        return False
    return any(
        re.search(rf"\b{re.escape(term)}\b", document.content, re.IGNORECASE)
        for term in contains_contents
    )


def matches_author(document: Document, author_ids: Optional[Sequence[str]]) -> bool:
    """Автор документа входит в список"""
    if not author_ids:
        return True
    return document.author is not None and document.author.id in author_ids


def matches_created(
    document: Document,
    created_from: Optional[datetime],
    created_to: Optional[datetime]
) -> bool:
    """Дата создания попадает в диапазон, границы включительно"""
    if created_from is None and created_to is None:
        return True
    if document.created is None:
        return False

    created = _as_utc(document.created)
    if created_from is not None and created < _as_utc(created_from):
        return False
    if created_to is not None and created > _as_utc(created_to):
        return False
    return True


def matches_request(document: Document, request: SearchRequest) -> bool:
    """Документ удовлетворяет всем критериям запроса"""
    return (
        matches_title(document, request.title_prefixes)
        and matches_content(document, request.contains_contents)
        and matches_author(document, request.author_ids)
        and matches_created(document, request.created_from, request.created_to)
    )

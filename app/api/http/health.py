from fastapi import APIRouter, Depends

from app.api.deps import get_document_service
from app.domains.documents.services import DocumentService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(document_service: DocumentService = Depends(get_document_service)):
    """Проверка состояния сервиса"""
    return {"status": "ok", "documents": document_service.count()}

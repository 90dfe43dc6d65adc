from fastapi import APIRouter, Depends, HTTPException, status
import logging

from app.api.deps import get_document_service
from app.domains.documents.schemas import (
    DocumentSave, DocumentResponse, SearchRequest, DocumentSearchResponse
)
from app.domains.documents.services import DocumentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/", response_model=DocumentResponse)
async def save_document(
    document_data: DocumentSave,
    document_service: DocumentService = Depends(get_document_service)
):
    """Создание или замена документа"""
    document = document_service.save(document_data.to_entity())
    logger.info(f"Document {document.id} saved")
    return DocumentResponse.model_validate(document)


@router.post("/search", response_model=DocumentSearchResponse)
async def search_documents(
    search_request: SearchRequest,
    document_service: DocumentService = Depends(get_document_service)
):
    """Поиск документов"""
    documents = document_service.search(search_request)

    return DocumentSearchResponse(
        documents=[DocumentResponse.model_validate(doc) for doc in documents],
        total_found=len(documents)
    )


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение документа по id"""
    document = document_service.find_by_id(document_id)

    if not document:
        logger.warning(f"Document {document_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return DocumentResponse.model_validate(document)

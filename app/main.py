from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from app.core.config import settings
from app.core.errors import InvalidDocumentError, invalid_document_handler
from app.api.http.health import router as health_router
from app.api.http.documents import router as documents_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(name)s %(levelname)s %(message)s"
)

app = FastAPI(
    title=settings.app_name,
    description="Хранилище документов в памяти с поиском по нескольким критериям",
    version=settings.app_version
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(InvalidDocumentError, invalid_document_handler)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(documents_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": f"{settings.app_name} API",
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }

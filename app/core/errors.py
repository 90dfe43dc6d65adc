from fastapi import Request, status
from fastapi.responses import JSONResponse


class InvalidDocumentError(ValueError):
    """Некорректный аргумент при работе с хранилищем документов"""

    code = "INVALID_ARGUMENT"


def err(code: str, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}}
    )


async def invalid_document_handler(request: Request, exc: InvalidDocumentError) -> JSONResponse:
    """Ответ 400 для некорректного документа"""
    return err(exc.code, str(exc), status.HTTP_400_BAD_REQUEST)

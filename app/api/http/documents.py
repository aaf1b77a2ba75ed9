from typing import Optional

from fastapi import APIRouter, Depends, Path, status, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import admin_access, verify_token
from app.core.db import get_db
from app.core.errors import service_errors
from app.db.base import MAX_DB_INT
from app.domains.documents.entities import AccessLevel
from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentPage, MessageResponse
)
from app.domains.documents.services import DocumentService
from app.domains.identity.entities import IdentityContext

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Создание нового документа"""
    document_service = DocumentService(db)

    with service_errors("creating document"):
        document = await document_service.create_document(document_data, identity)

    return DocumentResponse.model_validate(document)


@router.get("", response_model=DocumentPage)
async def list_documents(
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    identity: IdentityContext = Depends(admin_access),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка всех документов (только admin)"""
    document_service = DocumentService(db)

    with service_errors("listing documents"):
        return await document_service.list_documents(limit, offset)


@router.get("/access", response_model=DocumentPage)
async def list_documents_by_access(
    access: AccessLevel = Query(...),
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Получение документов по уровню доступа"""
    document_service = DocumentService(db)

    with service_errors("listing documents by access"):
        return await document_service.list_documents_by_access(access, limit, offset)


@router.get("/search", response_model=DocumentPage)
async def search_documents(
    query: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Поиск документов"""
    document_service = DocumentService(db)

    with service_errors("searching documents"):
        return await document_service.search_documents(identity, query, limit, offset)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int = Path(..., ge=1, le=MAX_DB_INT),
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Получение документа по id"""
    document_service = DocumentService(db)

    with service_errors("reading document"):
        document = await document_service.get_document(document_id, identity)

    return DocumentResponse.model_validate(document)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    update_data: DocumentUpdate,
    document_id: int = Path(..., ge=1, le=MAX_DB_INT),
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Обновление документа"""
    document_service = DocumentService(db)

    with service_errors("updating document"):
        document = await document_service.update_document(document_id, update_data, identity)

    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", response_model=MessageResponse)
async def delete_document(
    document_id: int = Path(..., ge=1, le=MAX_DB_INT),
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Удаление документа"""
    document_service = DocumentService(db)

    with service_errors("deleting document"):
        await document_service.delete_document(document_id, identity)

    return MessageResponse(message="Document Deleted")

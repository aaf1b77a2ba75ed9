import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound, OwnershipViolation
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.documents.entities import AccessLevel, Document, DocumentAccess
from app.domains.documents.pagination import PageRequest
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate, DocumentPage, DocumentResponse
from app.domains.identity.entities import IdentityContext

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = "10"
DEFAULT_OFFSET = "0"

DOCUMENT_NOT_FOUND = "Document Not Found"


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.user_repository = UserRepository(session)

    async def create_document(self, document_data: DocumentCreate, identity: IdentityContext) -> Document:
        """Создание документа; владелец - всегда вызывающий пользователь"""
        fields = document_data.model_dump()
        fields["owner_id"] = identity.user_id

        document = await self.document_repository.create(fields)
        logger.info("User %s created document %s", identity.user_id, document.id)
        return document

    async def list_documents(
        self, limit: Optional[str] = DEFAULT_LIMIT, offset: Optional[str] = DEFAULT_OFFSET
    ) -> DocumentPage:
        """Все документы, новые первыми"""
        page = PageRequest.parse(limit or DEFAULT_LIMIT, offset or DEFAULT_OFFSET)
        total, documents = await self.document_repository.list_page(page.limit, page.offset)
        return self._to_page(page, total, documents)

    async def list_documents_by_access(
        self,
        access: AccessLevel,
        limit: Optional[str] = None,
        offset: Optional[str] = None
    ) -> DocumentPage:
        """Документы с заданным уровнем доступа (без проверки владельца)"""
        page = PageRequest.parse(limit, offset)
        total, documents = await self.document_repository.list_by_access(access, page.limit, page.offset)
        return self._to_page(page, total, documents)

    async def search_documents(
        self,
        identity: IdentityContext,
        query: Optional[str] = None,
        limit: Optional[str] = None,
        offset: Optional[str] = None
    ) -> DocumentPage:
        """Поиск по заголовку и содержимому среди публичных и своих документов"""
        page = PageRequest.parse(limit, offset)
        total, documents = await self.document_repository.search(
            user_id=identity.user_id,
            query=query,
            limit=page.limit,
            offset=page.offset
        )
        return self._to_page(page, total, documents)

    async def get_document(self, document_id: int, identity: IdentityContext) -> Document:
        """Получение документа с проверкой видимости"""
        document = await self._get_existing(document_id)
        access = DocumentAccess(document)

        owner_role_id = None
        if access.requires_owner_role():
            # Отдельное чтение владельца: роль может смениться между запросами
            owner = await self.user_repository.get_by_id(document.owner_id)
            owner_role_id = owner.role_id if owner else None

        if not access.can_view(identity, owner_role_id):
            logger.info("User %s denied view of document %s", identity.user_id, document_id)
            raise OwnershipViolation("You cannot view this document")

        return document

    async def update_document(
        self,
        document_id: int,
        update_data: DocumentUpdate,
        identity: IdentityContext
    ) -> Document:
        """Обновление документа владельцем"""
        document = await self._get_existing(document_id)

        if not DocumentAccess(document).can_edit(identity):
            logger.info("User %s denied update of document %s", identity.user_id, document_id)
            raise OwnershipViolation("You cannot update this document")

        changes = update_data.changes()
        if not changes:
            return document

        updated = await self.document_repository.update(document_id, changes)
        if updated is None:
            raise NotFound(DOCUMENT_NOT_FOUND)
        return updated

    async def delete_document(self, document_id: int, identity: IdentityContext) -> None:
        """Удаление документа владельцем"""
        document = await self._get_existing(document_id)

        if not DocumentAccess(document).can_edit(identity):
            logger.info("User %s denied delete of document %s", identity.user_id, document_id)
            raise OwnershipViolation("You cannot delete this document")

        if not await self.document_repository.delete(document_id):
            raise NotFound(DOCUMENT_NOT_FOUND)
        logger.info("User %s deleted document %s", identity.user_id, document_id)

    async def _get_existing(self, document_id: int) -> Document:
        document = await self.document_repository.get_by_id(document_id)
        if document is None:
            raise NotFound(DOCUMENT_NOT_FOUND)
        return document

    def _to_page(self, page: PageRequest, total: int, documents: list) -> DocumentPage:
        return DocumentPage(
            documents=[DocumentResponse.model_validate(doc) for doc in documents],
            metadata=page.metadata(total_count=total, page_size=len(documents)),
        )

from typing import Optional, List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func, and_, or_
from sqlalchemy.exc import IntegrityError

from app.core.errors import ValidationFailed
from app.db.base import as_utc
from app.db.models.document import Document as DocumentModel
from app.domains.documents.entities import Document, AccessLevel


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fields: dict) -> Document:
        """Создание нового документа"""
        db_document = DocumentModel(**fields)

        self.session.add(db_document)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationFailed([str(e.orig)])
        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def get_by_id(self, document_id: int) -> Optional[Document]:
        """Получение документа по id"""
        db_document = await self._get_model(document_id)
        return self._to_domain(db_document) if db_document else None

    async def update(self, document_id: int, fields: dict) -> Optional[Document]:
        """Частичное обновление документа"""
        db_document = await self._get_model(document_id)
        if db_document is None:
            return None

        for name, value in fields.items():
            setattr(db_document, name, value)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationFailed([str(e.orig)])
        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def delete(self, document_id: int) -> bool:
        """Удаление документа"""
        result = await self.session.execute(
            delete(DocumentModel).where(DocumentModel.id == document_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def list_page(
        self, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> Tuple[int, List[Document]]:
        """Все документы, новые первыми"""
        return await self._find_and_count([], limit, offset)

    async def list_by_access(
        self, access: AccessLevel, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> Tuple[int, List[Document]]:
        """Документы с заданным уровнем доступа"""
        return await self._find_and_count([DocumentModel.access == access], limit, offset)

    async def search(
        self,
        user_id: int,
        query: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> Tuple[int, List[Document]]:
        """Поиск среди публичных документов и документов пользователя"""
        conditions = [
            or_(
                DocumentModel.access == AccessLevel.PUBLIC,
                DocumentModel.owner_id == user_id,
            )
        ]

        if query:
            conditions.append(
                or_(
                    DocumentModel.title.contains(query, autoescape=True),
                    DocumentModel.content.contains(query, autoescape=True),
                )
            )

        return await self._find_and_count(conditions, limit, offset)

    async def _get_model(self, document_id: int) -> Optional[DocumentModel]:
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.id == document_id)
        )
        return result.scalar_one_or_none()

    async def _find_and_count(
        self, conditions: list, limit: Optional[int], offset: Optional[int]
    ) -> Tuple[int, List[Document]]:
        """Количество подходящих строк и сама страница"""
        where = and_(*conditions) if conditions else None

        count_query = select(func.count(DocumentModel.id))
        rows_query = select(DocumentModel).order_by(
            DocumentModel.created_at.desc(), DocumentModel.id.desc()
        )
        if where is not None:
            count_query = count_query.where(where)
            rows_query = rows_query.where(where)
        if offset:
            rows_query = rows_query.offset(offset)
        if limit is not None:
            rows_query = rows_query.limit(limit)

        total = (await self.session.execute(count_query)).scalar()
        result = await self.session.execute(rows_query)
        db_documents = result.scalars().all()
        return total, [self._to_domain(doc) for doc in db_documents]

    def _to_domain(self, db_document: DocumentModel) -> Document:
        """Преобразование модели БД в доменную сущность"""
        return Document(
            id=db_document.id,
            title=db_document.title,
            content=db_document.content,
            access=db_document.access,
            owner_id=db_document.owner_id,
            created_at=as_utc(db_document.created_at),
            updated_at=as_utc(db_document.updated_at)
        )

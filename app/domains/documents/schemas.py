from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from app.domains.documents.entities import AccessLevel


class CamelModel(BaseModel):
    """JSON в camelCase, на входе принимаются оба варианта имён"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DocumentCreate(CamelModel):
    """Схема для создания документа (ownerId из тела игнорируется)"""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    access: AccessLevel = AccessLevel.PUBLIC

    @field_validator('title', 'content')
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty')
        return v


class DocumentUpdate(CamelModel):
    """Схема для частичного обновления документа"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    access: Optional[AccessLevel] = None

    @field_validator('title', 'content', 'access')
    @classmethod
    def validate_not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        if isinstance(v, str) and not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty')
        return v

    def changes(self) -> dict:
        """Только явно переданные поля"""
        return self.model_dump(exclude_unset=True)


class DocumentResponse(CamelModel):
    """Схема для ответа с данными документа"""
    id: int
    title: str
    content: str
    access: AccessLevel
    owner_id: int
    created_at: datetime
    updated_at: datetime


class PaginationMetadata(CamelModel):
    total_count: int
    pages: int
    current_page: int
    page_size: int


class DocumentPage(CamelModel):
    """Страница документов с метаданными пагинации"""
    documents: List[DocumentResponse]
    metadata: Optional[PaginationMetadata] = None


class MessageResponse(BaseModel):
    message: str

from app.domains.documents.entities import AccessLevel, Document, DocumentAccess
from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse,
    PaginationMetadata, DocumentPage, MessageResponse
)

__all__ = [
    "AccessLevel", "Document", "DocumentAccess",
    "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "PaginationMetadata", "DocumentPage", "MessageResponse",
]

from app.db.base import Base
from app.db.models.user import User, Role
from app.db.models.document import Document

__all__ = [
    "Base",
    "User",
    "Role",
    "Document",
]

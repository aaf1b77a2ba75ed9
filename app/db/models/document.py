from sqlalchemy import Column, String, Text, Integer, ForeignKey, Enum
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.domains.documents.entities import AccessLevel


class Document(BaseModel):
    __tablename__ = "documents"

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    access = Column(
        Enum(
            AccessLevel,
            name="document_access",
            values_callable=lambda levels: [level.value for level in levels],
        ),
        nullable=False,
        default=AccessLevel.PUBLIC,
        index=True,
    )
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", back_populates="owned_documents")

from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class Role(BaseModel):
    __tablename__ = "roles"

    title = Column(String(100), unique=True, nullable=False)

    # Relationships
    users = relationship("User", back_populates="role")


class User(BaseModel):
    __tablename__ = "users"

    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)

    # Relationships
    role = relationship("Role", back_populates="users")
    owned_documents = relationship("Document", back_populates="owner", cascade="all, delete-orphan")

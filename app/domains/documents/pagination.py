"""Разбор параметров limit/offset и расчёт метаданных страницы.

Параметры приходят строками из query. Метаданные считаются только когда
заданы оба параметра и limit > 0, иначе возвращается None.
"""
from dataclasses import dataclass
from typing import Optional

from app.core.errors import ValidationFailed
from app.db.base import MAX_DB_INT
from app.domains.documents.schemas import PaginationMetadata


def _to_int(name: str, value: Optional[str]) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationFailed([f"{name} must be an integer"])
    if number < 0:
        raise ValidationFailed([f"{name} must not be negative"])
    if number > MAX_DB_INT:
        raise ValidationFailed([f"{name} is too large"])
    return number


@dataclass(frozen=True)
class PageRequest:
    limit: Optional[int] = None
    offset: Optional[int] = None

    @classmethod
    def parse(cls, limit: Optional[str] = None, offset: Optional[str] = None) -> "PageRequest":
        return cls(limit=_to_int("limit", limit), offset=_to_int("offset", offset))

    @property
    def has_metadata(self) -> bool:
        return bool(self.limit) and self.offset is not None

    def metadata(self, total_count: int, page_size: int) -> Optional[PaginationMetadata]:
        if not self.has_metadata:
            return None
        return PaginationMetadata(
            total_count=total_count,
            pages=-(-total_count // self.limit),
            current_page=self.offset // self.limit + 1,
            page_size=page_size,
        )

import logging
from contextlib import contextmanager
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Базовая ошибка сервисного слоя с HTTP-статусом"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def detail(self):
        return self.message


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(ServiceError):
    status_code = status.HTTP_406_NOT_ACCEPTABLE


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class OwnershipViolation(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationFailed(ServiceError):
    """Входные данные отклонены схемой или базой данных"""

    def __init__(self, messages: List[str]):
        super().__init__("; ".join(messages))
        self.messages = messages

    @property
    def detail(self):
        return self.messages


def as_http_exception(error: ServiceError, headers: Optional[dict] = None) -> HTTPException:
    """Преобразование ошибки сервиса в HTTPException"""
    return HTTPException(
        status_code=error.status_code,
        detail=error.detail,
        headers=headers,
    )


@contextmanager
def service_errors(action: str):
    """Ошибки сервиса и базы данных -> HTTPException"""
    try:
        yield
    except ServiceError as e:
        raise as_http_exception(e)
    except SQLAlchemyError as e:
        logger.exception("Database error while %s", action)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

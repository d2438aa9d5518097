"""
Operational errors raised by the service layer.

They subclass HTTPException so FastAPI renders them as {"detail": message}
with the matching status code. Anything that is not an AppError is treated
as a fault by the global handler in main.py.
"""

from fastapi import HTTPException
from starlette import status


class AppError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class Conflict(AppError):
    # Illegal status transitions map to 400, not 409
    status_code = status.HTTP_400_BAD_REQUEST

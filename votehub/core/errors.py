# votehub/core/errors.py
from fastapi import status


class AppError(Exception):
    """API 에러 공통 부모 (응답: success=False, message, errors)"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_body(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    """권한 없음, 그룹 비밀번호 불일치, 투표 기간 아님"""
    status_code = status.HTTP_403_FORBIDDEN


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: str | None = None, errors: list[dict] | None = None):
        if errors is None and field is not None:
            errors = [{"field": field, "message": message}]
        super().__init__(message, errors)


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT

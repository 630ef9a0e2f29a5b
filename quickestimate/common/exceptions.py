from typing import Any

from fastapi import HTTPException, status


class QuickEstimateException(HTTPException):
    def __init__(self, detail: Any, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(QuickEstimateException):
    def __init__(self, resource: str, resource_id: str | None = None):
        detail = f"{resource} not found"
        if resource_id:
            detail = f"{resource} '{resource_id}' not found"
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class UnauthorizedError(QuickEstimateException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail=detail, status_code=status.HTTP_401_UNAUTHORIZED)


class BadRequestError(QuickEstimateException):
    def __init__(self, detail: str, errors: list[dict[str, Any]] | None = None):
        body: Any = detail
        if errors is not None:
            body = {"message": detail, "errors": errors}
        super().__init__(detail=body, status_code=status.HTTP_400_BAD_REQUEST)


class ConfigurationError(QuickEstimateException):
    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

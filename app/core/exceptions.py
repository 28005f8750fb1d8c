from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SECTION_ITEM_NOT_FOUND = "SECTION_ITEM_NOT_FOUND"
    INVALID_SECTION_DATA = "INVALID_SECTION_DATA"

    LLM_ERROR = "LLM_ERROR"
    LLM_API_ERROR = "LLM_API_ERROR"
    STRUCTURE_FAILED = "STRUCTURE_FAILED"
    REWRITE_FAILED = "REWRITE_FAILED"
    REWRITE_VALIDATION_ERROR = "REWRITE_VALIDATION_ERROR"
    REWRITE_PARSE_ERROR = "REWRITE_PARSE_ERROR"


class CustomException(Exception):
    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        super().__init__(message)


class LLMError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.LLM_ERROR,
            message="LLM 호출에 실패했습니다",
            detail=detail,
        )


class SessionNotFoundError(CustomException):
    def __init__(self, session_id: str):
        super().__init__(
            status_code=404,
            error_code=ErrorCode.SESSION_NOT_FOUND,
            message="편집 세션을 찾을 수 없습니다",
            detail=f"session_id={session_id}",
        )


class SectionItemNotFoundError(CustomException):
    def __init__(self, kind: str, item_id: str | None):
        super().__init__(
            status_code=404,
            error_code=ErrorCode.SECTION_ITEM_NOT_FOUND,
            message="편집할 항목을 찾을 수 없습니다. 이미 삭제되었을 수 있습니다",
            detail=f"kind={kind} id={item_id}",
        )


class InvalidSectionDataError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.INVALID_SECTION_DATA,
            message="섹션 데이터 형식이 올바르지 않습니다",
            detail=detail,
        )


class RewriteFailedError(CustomException):
    def __init__(self, error_code: ErrorCode | str | None = None, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=error_code or ErrorCode.REWRITE_FAILED,
            message="AI 어시스턴트가 요청을 처리하지 못했습니다",
            detail=detail,
        )


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        content = {
            "error_code": exc.error_code,
            "message": exc.message,
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
        )

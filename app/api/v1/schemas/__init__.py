from app.api.v1.schemas.sessions import (
    CreateSessionRequest,
    EnhanceRequest,
    EnhanceResponse,
    ImportResumeRequest,
    SaveSectionRequest,
    SessionResponse,
)

__all__ = [
    "CreateSessionRequest",
    "ImportResumeRequest",
    "SaveSectionRequest",
    "EnhanceRequest",
    "SessionResponse",
    "EnhanceResponse",
]

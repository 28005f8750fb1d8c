"""편집 세션 API 스키마."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.core.config import settings
from app.domain.resume.editing import EditTarget
from app.domain.resume.schemas import AIFeedback, Resume
from app.domain.resume.session import EditingSession


class CreateSessionRequest(BaseModel):
    """세션 생성 요청. resume이 없으면 빈 템플릿"""

    resume: Resume | None = None


class ImportResumeRequest(BaseModel):
    """이력서 텍스트 가져오기 요청."""

    resume_text: str = Field(alias="resumeText", min_length=1)

    @field_validator("resume_text")
    @classmethod
    def validate_resume_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("이력서 텍스트가 비어 있습니다")
        if len(v) > settings.resume_text_max_length:
            raise ValueError(
                f"이력서 텍스트는 {settings.resume_text_max_length}자를 넘을 수 없습니다"
            )
        return v

    class Config:
        populate_by_name = True


class SaveSectionRequest(BaseModel):
    """섹션 저장 요청."""

    target: EditTarget
    data: Any


class EnhanceRequest(BaseModel):
    """AI 재작성 요청."""

    query: str = Field(min_length=1)
    reference_texts: list[str] = Field(default_factory=list, alias="referenceTexts")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("요청 내용을 입력해주세요")
        return v.strip()

    @field_validator("reference_texts")
    @classmethod
    def validate_reference_texts(cls, v: list[str]) -> list[str]:
        return [text for text in v if text.strip()]

    class Config:
        populate_by_name = True


class SessionResponse(BaseModel):
    """편집 세션 스냅샷 응답."""

    session_id: str = Field(alias="sessionId")
    resume: Resume
    can_undo: bool = Field(alias="canUndo")
    can_redo: bool = Field(alias="canRedo")
    feedback: AIFeedback | None = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_session(cls, session: EditingSession) -> "SessionResponse":
        return cls(
            session_id=session.session_id,
            resume=session.document,
            can_undo=session.can_undo,
            can_redo=session.can_redo,
            feedback=session.feedback,
        )


class EnhanceResponse(SessionResponse):
    """AI 재작성 응답. 더 새로운 요청에 밀려 버려졌으면 committed=False"""

    committed: bool

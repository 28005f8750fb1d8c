from typing import TypedDict

from pydantic import BaseModel, Field

from app.domain.resume.schemas.document import CamelModel, Resume


class AIFeedback(CamelModel):
    """AI 피드백 - 요청/참고 문서 대비 이력서 적합도"""

    score: int = Field(
        ge=0,
        le=100,
        description="A score (0-100) of the resume's fit to the request and reference documents.",
    )
    justification: str = Field(
        description="A detailed explanation of the score, highlighting strengths and weaknesses."
    )
    suggested_roles: list[str] = Field(
        default_factory=list, description="Other job roles the user might be a good fit for."
    )
    skills_to_learn: list[str] = Field(
        default_factory=list, description="Skills the user could learn to become stronger."
    )


class RewriteRequest(BaseModel):
    """AI 재작성 요청"""

    query: str
    reference_texts: list[str] = []


class EnhanceOutcome(BaseModel):
    """AI 재작성 결과 - 오래된 요청이면 committed=False"""

    committed: bool
    feedback: AIFeedback | None = None


class RewriteState(TypedDict, total=False):
    """LangGraph 재작성 워크플로우 상태"""

    request: RewriteRequest
    resume: Resume
    session_id: str | None
    rewritten: Resume
    feedback: AIFeedback
    error_code: str
    error_message: str

"""편집 세션 서비스.

사용자 편집은 바로 히스토리에 반영하고, AI 재작성은 요청 시점 문서와 정합한 뒤 반영한다.
외부 LLM 호출 결과를 기다리는 동안 더 새로운 요청이 들어오면 이전 결과는 버린다.
"""

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.core.context import set_session_id
from app.core.exceptions import ErrorCode, LLMError, RewriteFailedError
from app.core.logging import get_logger
from app.domain.resume.editing import EditTarget, SectionKind, remove_item, save_section
from app.domain.resume.schemas import EnhanceOutcome, Resume, RewriteRequest, RewriteState
from app.domain.resume.session import EditingSession, SessionRegistry, registry
from app.domain.resume.workflow import create_rewrite_workflow
from app.infra.llm.client import structure_resume

logger = get_logger(__name__)

_workflow = None


def get_workflow():
    """재작성 워크플로우 싱글톤 반환"""
    global _workflow
    if _workflow is None:
        _workflow = create_rewrite_workflow()
    return _workflow


def create_session(
    document: Resume | None = None,
    sessions: SessionRegistry = registry,
) -> EditingSession:
    """빈 템플릿 또는 주어진 문서로 편집 세션 생성"""
    session = sessions.create(document)
    set_session_id(session.session_id)
    return session


async def import_resume_text(
    resume_text: str,
    sessions: SessionRegistry = registry,
) -> EditingSession:
    """이력서 텍스트를 LLM으로 구조화한 뒤 편집 세션 생성"""
    try:
        document = await structure_resume(resume_text)
    except httpx.HTTPStatusError as e:
        logger.error("이력서 구조화 LLM API 오류 status=%d", e.response.status_code)
        raise LLMError(detail=f"HTTP {e.response.status_code}") from e
    except (ValueError, PydanticValidationError) as e:
        logger.error("이력서 구조화 결과 검증 실패 error=%s", e)
        raise LLMError(detail=f"{ErrorCode.STRUCTURE_FAILED.value}: {e}") from e

    return create_session(document, sessions)


def apply_section_edit(
    session_id: str,
    target: EditTarget,
    data: Any,
    sessions: SessionRegistry = registry,
) -> EditingSession:
    """섹션 편집 저장"""
    session = sessions.get(session_id)
    session.commit(save_section(session.document, target, data))
    return session


def remove_section_item(
    session_id: str,
    kind: SectionKind,
    item_id: str,
    sessions: SessionRegistry = registry,
) -> EditingSession:
    """식별 컬렉션 항목 삭제"""
    session = sessions.get(session_id)
    session.commit(remove_item(session.document, kind, item_id))
    return session


def undo(session_id: str, sessions: SessionRegistry = registry) -> EditingSession:
    session = sessions.get(session_id)
    if not session.undo():
        logger.debug("undo 불가, 무시")
    return session


def redo(session_id: str, sessions: SessionRegistry = registry) -> EditingSession:
    session = sessions.get(session_id)
    if not session.redo():
        logger.debug("redo 불가, 무시")
    return session


async def enhance_resume(
    session_id: str,
    request: RewriteRequest,
    sessions: SessionRegistry = registry,
) -> EnhanceOutcome:
    """AI 재작성 실행 후 최신 요청일 때만 정합하여 반영"""
    session = sessions.get(session_id)
    ticket = session.begin_rewrite()
    logger.info("AI 재작성 시작 request_no=%d", ticket.request_no)

    state: RewriteState = await get_workflow().ainvoke(
        RewriteState(request=request, resume=ticket.base, session_id=session_id)
    )

    if state.get("error_code"):
        if session.is_stale(ticket):
            logger.info("오래된 재작성 요청 실패 무시 request_no=%d", ticket.request_no)
            return EnhanceOutcome(committed=False)
        raise RewriteFailedError(
            error_code=state["error_code"],
            detail=state.get("error_message"),
        )

    feedback = state.get("feedback")
    committed = session.commit_rewrite(ticket, state["rewritten"], feedback)
    logger.info("AI 재작성 종료 request_no=%d committed=%s", ticket.request_no, committed)
    return EnhanceOutcome(committed=committed, feedback=feedback if committed else None)

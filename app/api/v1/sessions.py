from fastapi import APIRouter, Request, Response

from app.api.v1.schemas import (
    CreateSessionRequest,
    EnhanceRequest,
    EnhanceResponse,
    ImportResumeRequest,
    SaveSectionRequest,
    SessionResponse,
)
from app.core.config import settings
from app.core.limiter import limiter
from app.core.logging import get_logger
from app.domain.resume import service
from app.domain.resume.editing import SectionKind
from app.domain.resume.schemas import RewriteRequest
from app.domain.resume.session import registry

router = APIRouter(prefix="/sessions", tags=["sessions"])
logger = get_logger(__name__)


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(body: CreateSessionRequest) -> SessionResponse:
    session = service.create_session(body.resume)
    return SessionResponse.from_session(session)


@router.post("/import", response_model=SessionResponse, status_code=201)
@limiter.limit(settings.rate_limit_ai)
async def import_resume(request: Request, body: ImportResumeRequest) -> SessionResponse:
    session = await service.import_resume_text(body.resume_text)
    return SessionResponse.from_session(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    return SessionResponse.from_session(registry.get(session_id))


@router.put("/{session_id}/sections", response_model=SessionResponse)
async def save_section(session_id: str, body: SaveSectionRequest) -> SessionResponse:
    session = service.apply_section_edit(session_id, body.target, body.data)
    return SessionResponse.from_session(session)


@router.delete("/{session_id}/sections/{kind}/{item_id}", response_model=SessionResponse)
async def remove_section_item(session_id: str, kind: SectionKind, item_id: str) -> SessionResponse:
    session = service.remove_section_item(session_id, kind, item_id)
    return SessionResponse.from_session(session)


@router.post("/{session_id}/undo", response_model=SessionResponse)
async def undo(session_id: str) -> SessionResponse:
    return SessionResponse.from_session(service.undo(session_id))


@router.post("/{session_id}/redo", response_model=SessionResponse)
async def redo(session_id: str) -> SessionResponse:
    return SessionResponse.from_session(service.redo(session_id))


@router.post("/{session_id}/enhance", response_model=EnhanceResponse)
@limiter.limit(settings.rate_limit_ai)
async def enhance(request: Request, session_id: str, body: EnhanceRequest) -> EnhanceResponse:
    outcome = await service.enhance_resume(
        session_id,
        RewriteRequest(query=body.query, reference_texts=body.reference_texts),
    )
    session = registry.get(session_id)
    snapshot = SessionResponse.from_session(session)
    return EnhanceResponse(**snapshot.model_dump(), committed=outcome.committed)


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str) -> Response:
    registry.close(session_id)
    return Response(status_code=204)

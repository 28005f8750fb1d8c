"""편집 세션과 메모리 세션 레지스트리.

세션 하나가 히스토리 저장소 하나를 소유한다. AI 재작성은 요청 시점의 문서를
기준으로 정합되며, 더 새로운 요청이 발행된 뒤 도착한 결과는 버린다 (last-request-wins).
"""

import uuid
from collections import OrderedDict
from dataclasses import dataclass

from app.core.config import settings
from app.core.exceptions import SessionNotFoundError
from app.core.logging import get_logger
from app.domain.resume.history import HistoryStore, changed_fields
from app.domain.resume.reconciler import assign_identities, reconcile
from app.domain.resume.schemas import AIFeedback, Resume

logger = get_logger(__name__)


@dataclass(frozen=True)
class RewriteTicket:
    """진행 중인 AI 재작성 요청 표식"""

    request_no: int
    base: Resume


class EditingSession:
    """단일 사용자 편집 세션"""

    def __init__(self, session_id: str, document: Resume | None = None):
        self.session_id = session_id
        self._history: HistoryStore[Resume] = HistoryStore(assign_identities(document or Resume()))
        self._latest_request_no = 0
        self.feedback: AIFeedback | None = None

    @property
    def document(self) -> Resume:
        return self._history.present

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def commit(self, document: Resume) -> bool:
        """사용자 편집 결과를 새 present로 반영"""
        before = self._history.present
        changed = self._history.set(document)
        if changed:
            logger.info("편집 반영", fields=changed_fields(before, document))
        else:
            logger.debug("변경 없는 편집 무시")
        return changed

    def undo(self) -> bool:
        return self._history.undo()

    def redo(self) -> bool:
        return self._history.redo()

    def begin_rewrite(self) -> RewriteTicket:
        """AI 재작성 요청 시작. 이전에 발급된 티켓은 모두 오래된 것이 된다"""
        self._latest_request_no += 1
        return RewriteTicket(request_no=self._latest_request_no, base=self._history.present)

    def is_stale(self, ticket: RewriteTicket) -> bool:
        return ticket.request_no != self._latest_request_no

    def commit_rewrite(
        self,
        ticket: RewriteTicket,
        returned: Resume,
        feedback: AIFeedback | None = None,
    ) -> bool:
        """AI 재작성 결과를 정합 후 반영. 오래된 요청 결과면 버리고 False 반환"""
        if self.is_stale(ticket):
            logger.info(
                "오래된 재작성 결과 폐기 request_no=%d latest=%d",
                ticket.request_no,
                self._latest_request_no,
            )
            return False

        merged = reconcile(ticket.base, returned)
        self.commit(merged)
        if feedback is not None:
            self.feedback = feedback
        return True


class SessionRegistry:
    """프로세스 메모리 세션 저장소 - 영속화 없음"""

    def __init__(self, max_count: int | None = None):
        self._sessions: OrderedDict[str, EditingSession] = OrderedDict()
        self._max_count = max_count if max_count is not None else settings.session_max_count

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self, document: Resume | None = None) -> EditingSession:
        session = EditingSession(str(uuid.uuid4()), document)
        self._sessions[session.session_id] = session

        while len(self._sessions) > self._max_count:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.warning("세션 수 제한 초과, 가장 오래 쓰지 않은 세션 제거 evicted=%s", evicted_id)

        logger.info("세션 생성 session=%s total=%d", session.session_id, len(self._sessions))
        return session

    def get(self, session_id: str) -> EditingSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        # 수 제한 초과 시 가장 오래 쓰지 않은 세션부터 제거된다
        self._sessions.move_to_end(session_id)
        return session

    def close(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("세션 종료 session=%s total=%d", session_id, len(self._sessions))


registry = SessionRegistry()

"""AI 재작성 결과의 식별 토큰 정합.

AI는 본문을 자유롭게 다시 쓸 수 있지만, 이전 문서에 있던 항목은
같은 식별 토큰을 유지해야 UI 선택 상태와 undo 비교가 안정적으로 유지된다.
프롬프트 지시만으로는 보장되지 않으므로 여기서 코드로 강제한다.
"""

from pydantic import BaseModel

from app.core.logging import get_logger
from app.domain.resume.identity import new_unique_token
from app.domain.resume.schemas import IDENTIFIED_COLLECTIONS, Resume

logger = get_logger(__name__)


def _reconcile_collection(
    name: str,
    previous: list[BaseModel],
    returned: list[BaseModel],
) -> list[BaseModel]:
    known = {entry.id for entry in previous if entry.id}
    # 새 토큰은 반환된 컬렉션의 어떤 토큰과도 겹치지 않아야 한다
    taken = known | {entry.id for entry in returned if entry.id}
    used: set[str] = set()
    result = []
    minted = 0

    for entry in returned:
        if entry.id and entry.id in known and entry.id not in used:
            token = entry.id
        else:
            token = new_unique_token(taken)
            taken.add(token)
            minted += 1
        used.add(token)
        result.append(entry.model_copy(update={"id": token}, deep=True))

    dropped = len(known - used)
    if minted or dropped:
        logger.debug(
            "컬렉션 정합 collection=%s kept=%d minted=%d dropped=%d",
            name,
            len(result) - minted,
            minted,
            dropped,
        )
    return result


def reconcile(previous: Resume, returned: Resume) -> Resume:
    """AI가 반환한 문서를 이전 문서의 식별 토큰에 맞춰 정합한 새 문서 반환.

    - 이전 컬렉션에 있던 토큰을 가진 항목은 토큰 유지 (내용은 반환값 기준)
    - 토큰이 없거나 모르는 토큰, 같은 컬렉션 내 중복 토큰은 새 토큰 발급
    - 반환 문서에 없는 이전 항목은 삭제된 것으로 간주
    - 순서와 멤버십은 반환 문서 기준, 스칼라 필드/컬렉션은 반환값 그대로
    """
    update = {
        name: _reconcile_collection(name, getattr(previous, name), getattr(returned, name))
        for name in IDENTIFIED_COLLECTIONS
    }
    return returned.model_copy(update=update, deep=True)


def assign_identities(document: Resume) -> Resume:
    """세션에 처음 들어오는 문서의 식별 토큰 보장.

    컬렉션 내에서 유일한 기존 토큰은 유지하고, 없거나 중복된 토큰에는 새 토큰을 발급한다.
    """
    update = {}
    for name in IDENTIFIED_COLLECTIONS:
        entries = getattr(document, name)
        taken = {entry.id for entry in entries if entry.id}
        seen: set[str] = set()
        assigned = []
        for entry in entries:
            token = entry.id
            if not token or token in seen:
                token = new_unique_token(taken)
                taken.add(token)
            seen.add(token)
            assigned.append(entry.model_copy(update={"id": token}, deep=True))
        update[name] = assigned
    return document.model_copy(update=update, deep=True)

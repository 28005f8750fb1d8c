"""문서 히스토리 저장소.

present 하나와 past/future 스냅샷 스택으로 선형 undo/redo를 제공한다.
모든 연산은 메모리 상의 순수 상태 전이이며 예외를 던지지 않는다.
"""

import copy
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


def snapshots_equal(a: Any, b: Any) -> bool:
    """두 스냅샷의 구조적 동등성 비교 (참조 비교 아님)"""
    return _plain(a) == _plain(b)


def changed_fields(a: BaseModel, b: BaseModel) -> list[str]:
    """두 문서 사이에 값이 달라진 최상위 필드 이름 목록"""
    before = a.model_dump()
    after = b.model_dump()
    return [name for name in after if before.get(name) != after[name]]


class HistoryStore(Generic[T]):
    """선형 undo/redo 히스토리.

    past는 오래된 것부터, future는 가까운 것부터 정렬된다.
    새 값을 set하면 future는 항상 비워진다 (redo 분기 없음).
    저장되는 스냅샷은 호출자의 객체와 별칭을 공유하지 않는다. present/past/future는
    복사본을 돌려주므로 밖에서 필드를 고쳐도 히스토리에는 보이지 않는다.
    """

    def __init__(self, initial: T):
        self._past: list[T] = []
        self._present: T = copy.deepcopy(initial)
        self._future: list[T] = []

    @property
    def present(self) -> T:
        return copy.deepcopy(self._present)

    @property
    def past(self) -> tuple[T, ...]:
        return tuple(copy.deepcopy(self._past))

    @property
    def future(self) -> tuple[T, ...]:
        return tuple(copy.deepcopy(self._future))

    @property
    def can_undo(self) -> bool:
        return len(self._past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._future) > 0

    def set(self, new_value: T) -> bool:
        """새 present 채택. 현재 값과 같으면 히스토리를 건드리지 않고 False 반환"""
        if snapshots_equal(new_value, self._present):
            return False
        self._past.append(self._present)
        self._present = copy.deepcopy(new_value)
        self._future = []
        return True

    def undo(self) -> bool:
        if not self._past:
            return False
        self._future.insert(0, self._present)
        self._present = self._past.pop()
        return True

    def redo(self) -> bool:
        if not self._future:
            return False
        self._past.append(self._present)
        self._present = self._future.pop(0)
        return True

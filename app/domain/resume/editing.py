"""사용자 섹션 편집 명령.

편집 대상은 {kind, id} 태그 변형으로 표현한다. 모든 명령은 입력 문서를
변경하지 않고 새 문서를 만든다 (copy-on-write).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import InvalidSectionDataError, SectionItemNotFoundError
from app.domain.resume.identity import new_unique_token
from app.domain.resume.schemas import ENTRY_MODELS, SCALAR_COLLECTIONS, Resume
from app.domain.resume.schemas.document import CamelModel

CONTACT_FIELDS = (
    "first_name",
    "last_name",
    "profession",
    "email",
    "phone",
    "location",
    "pin_code",
    "linked_in",
    "driving_license",
)


class SectionKind(str, Enum):
    """편집 가능한 섹션 종류"""

    CONTACT = "contact"
    SUMMARY = "summary"
    SKILLS = "skills"
    ACHIEVEMENTS = "achievements"
    HOBBIES = "hobbies"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    WEBSITES = "websites"
    PROJECTS = "projects"
    CUSTOM_SECTIONS = "custom_sections"

    @property
    def is_collection(self) -> bool:
        return self.value in ENTRY_MODELS


SCALAR_LIST_KINDS = tuple(SectionKind(name) for name in SCALAR_COLLECTIONS)


class EditTarget(BaseModel):
    """편집 대상. id가 없으면 식별 컬렉션에 새 항목 추가"""

    kind: SectionKind
    id: str | None = None


class _ContactForm(CamelModel):
    first_name: str = ""
    last_name: str = ""
    profession: str | None = None
    email: str = ""
    phone: str = ""
    location: str | None = None
    pin_code: str | None = None
    linked_in: str | None = None
    driving_license: str | None = None


class _SummaryForm(BaseModel):
    summary: str


def _validate(model: type[BaseModel], data: Any) -> BaseModel:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise InvalidSectionDataError(detail=str(e)) from e


def _validate_string_list(data: Any) -> list[str]:
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise InvalidSectionDataError(detail="문자열 목록이 필요합니다")
    return list(data)


def _find_index(entries: list, item_id: str | None) -> int:
    for index, entry in enumerate(entries):
        if entry.id == item_id:
            return index
    return -1


def read_section(document: Resume, target: EditTarget) -> Any:
    """편집 폼에 채울 섹션 데이터 반환"""
    kind = target.kind

    if kind == SectionKind.CONTACT:
        return {name: getattr(document, name) for name in CONTACT_FIELDS}
    if kind == SectionKind.SUMMARY:
        return {"summary": document.summary}
    if kind in SCALAR_LIST_KINDS:
        return list(getattr(document, kind.value))

    if target.id is None:
        return ENTRY_MODELS[kind.value]()
    entries = getattr(document, kind.value)
    index = _find_index(entries, target.id)
    if index < 0:
        raise SectionItemNotFoundError(kind.value, target.id)
    return entries[index].model_copy(deep=True)


def save_section(document: Resume, target: EditTarget, data: Any) -> Resume:
    """편집 폼 저장 결과를 반영한 새 문서 반환"""
    kind = target.kind

    if not kind.is_collection and target.id is not None:
        raise InvalidSectionDataError(detail=f"{kind.value} 섹션은 id를 가질 수 없습니다")

    if kind == SectionKind.CONTACT:
        form = _validate(_ContactForm, data)
        return document.model_copy(update=form.model_dump(), deep=True)
    if kind == SectionKind.SUMMARY:
        form = _validate(_SummaryForm, data)
        return document.model_copy(update={"summary": form.summary}, deep=True)
    if kind in SCALAR_LIST_KINDS:
        return document.model_copy(update={kind.value: _validate_string_list(data)}, deep=True)

    entry = _validate(ENTRY_MODELS[kind.value], data)
    entries = [e.model_copy(deep=True) for e in getattr(document, kind.value)]

    if target.id is None:
        token = new_unique_token({e.id for e in entries if e.id})
        entries.append(entry.model_copy(update={"id": token}))
    else:
        index = _find_index(entries, target.id)
        if index < 0:
            raise SectionItemNotFoundError(kind.value, target.id)
        entries[index] = entry.model_copy(update={"id": target.id})

    return document.model_copy(update={kind.value: entries}, deep=True)


def remove_item(document: Resume, kind: SectionKind, item_id: str) -> Resume:
    """식별 컬렉션에서 항목을 제거한 새 문서 반환"""
    if not kind.is_collection:
        raise InvalidSectionDataError(detail=f"{kind.value} 섹션은 항목 삭제를 지원하지 않습니다")

    entries = getattr(document, kind.value)
    if _find_index(entries, item_id) < 0:
        raise SectionItemNotFoundError(kind.value, item_id)

    remaining = [e.model_copy(deep=True) for e in entries if e.id != item_id]
    return document.model_copy(update={kind.value: remaining}, deep=True)
